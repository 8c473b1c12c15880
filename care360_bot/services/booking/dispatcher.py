"""
Booking flow dispatcher: turns one inbound event into one outbound message.
"""

from typing import Iterable, List, Optional

from ...core.enums import Command, MenuKind, Stage
from ...core.exceptions import MalformedCallbackError, SlotUnavailableError, UpstreamUnavailable
from ...core.models.callback import CALLBACK_DATA_LIMIT, ById, ByName, CallbackToken
from ...core.models.messages import (
    Button,
    CallbackEvent,
    CommandEvent,
    InboundEvent,
    OutboundMessage,
)
from ...utils.event_log import log_event
from ...utils.logging import get_logger
from ...utils.text import utf8_length
from ..external import UpstreamClient
from ..profile import ProfileDirectory
from .callbacks import parse_callback
from .reservations import SlotReservations

logger = get_logger("care360.dispatcher")

WELCOME_TEXT = "Добро пожаловать! Выберите действие:"
PICK_PROFESSION_TEXT = "Выберите категорию врачей:"
PICK_CATEGORY_TEXT = "Выберите категорию врача:"
PICK_DATE_TEXT = "Выберите дату:"
PICK_TIME_TEXT = "Выберите время:"
CONFIRM_TEMPLATE = "Вы выбрали категорию: {category}, дату: {date}, время: {time}"

BRANCHES_HEADER = "Филиалы клиники:"
NO_BRANCHES_TEXT = "Филиалы клиники временно недоступны."
NO_CATEGORIES_TEXT = "Категории врачей временно недоступны."
NO_DATES_TEXT = "Свободных дат нет. Попробуйте выбрать другую категорию."
NO_TIMES_TEXT = "На эту дату свободного времени нет. Попробуйте выбрать другую дату."
PROFILE_NOT_FOUND_TEXT = "Ваши данные не найдены."
SLOT_TAKEN_TEXT = "Это время уже занято. Пожалуйста, выберите другое время."
UNRECOGNIZED_TEXT = "Ошибка: действие не распознано. Попробуйте снова."

PROFESSIONS_ERROR_TEXT = "Ошибка загрузки данных категорий. Пожалуйста, попробуйте позже."
CATEGORIES_ERROR_TEXT = "Ошибка загрузки категорий врачей."
BRANCHES_ERROR_TEXT = "Ошибка загрузки информации о филиалах."
USERS_ERROR_TEXT = "Ошибка загрузки данных пользователей."
DATES_ERROR_TEXT = "Ошибка загрузки данных о датах."
TIMES_ERROR_TEXT = "Ошибка загрузки данных о времени."


def _distinct(values: Iterable[Optional[str]]) -> List[str]:
    """Unique non-empty values in first-seen order."""
    return list(dict.fromkeys(v for v in values if v))


def _round_trips(token: CallbackToken) -> bool:
    """True when the encoded payload fits a button and parses back to the same token."""
    payload = token.encode()
    if utf8_length(payload) > CALLBACK_DATA_LIMIT:
        return False
    try:
        return parse_callback(payload) == token
    except MalformedCallbackError:
        return False


class BookingDispatcher:
    """Stateless dispatcher for one bot identity; booking progress lives in the callback payload."""

    def __init__(
        self,
        upstream: UpstreamClient,
        profiles: ProfileDirectory,
        reservations: Optional[SlotReservations] = None,
        *,
        identity: str = "-",
    ):
        self.upstream = upstream
        self.profiles = profiles
        self.reservations = reservations
        self.identity = identity

    async def handle(self, event: InboundEvent) -> OutboundMessage:
        """Produce exactly one outbound message for ``event``."""
        if isinstance(event, CommandEvent):
            message = await self._handle_command(event)
            log_event(
                "command",
                {"command": event.command.value, "chat_id": event.chat_id, "buttons": len(message.labels)},
                identity=self.identity,
            )
            return message

        message, stage = await self._handle_callback(event)
        log_event(
            "callback",
            {
                "payload": event.payload,
                "stage": stage.value if stage else None,
                "chat_id": event.chat_id,
                "buttons": len(message.labels),
            },
            identity=self.identity,
        )
        return message

    async def _handle_command(self, event: CommandEvent) -> OutboundMessage:
        if event.command == Command.START:
            return self.main_menu()
        if event.command == Command.BOOK:
            return await self._profession_menu()
        if event.command == Command.CLINIC_INFO:
            return await self._clinic_info()
        return self._profile(event.user_id)

    async def _handle_callback(self, event: CallbackEvent):
        try:
            token = parse_callback(event.payload)
        except MalformedCallbackError as e:
            logger.warning("[%s] Unrecognized callback from chat %s: %s", self.identity, event.chat_id, e)
            return OutboundMessage.plain(UNRECOGNIZED_TEXT), None

        if token.stage == Stage.SELECT_CATEGORY:
            message = await self._category_menu()
        elif token.stage == Stage.SELECT_DATE:
            message = await self._date_menu(token)
        elif token.stage == Stage.SELECT_TIME:
            message = await self._time_menu(token)
        else:
            message = await self._confirm(token, event.user_id)
        return message, token.stage

    def main_menu(self) -> OutboundMessage:
        return OutboundMessage(
            text=WELCOME_TEXT,
            buttons=[
                [Button(label=Command.BOOK.label), Button(label=Command.CLINIC_INFO.label)],
                [Button(label=Command.MY_PROFILE.label)],
            ],
            menu=MenuKind.REPLY,
        )

    def _menu(self, text: str, tokens: Iterable[CallbackToken], label_of, empty_text: str) -> OutboundMessage:
        buttons = []
        for token in tokens:
            if not _round_trips(token):
                logger.warning("[%s] Skipping value that cannot be encoded: %r", self.identity, token)
                continue
            buttons.append(Button(label=label_of(token), payload=token.encode()))
        if not buttons:
            return OutboundMessage.plain(empty_text)
        return OutboundMessage.inline_column(text, buttons)

    async def _profession_menu(self) -> OutboundMessage:
        try:
            doctors = await self.upstream.list_doctors()
        except UpstreamUnavailable as e:
            logger.error("[%s] book: %s", self.identity, e)
            return OutboundMessage.plain(PROFESSIONS_ERROR_TEXT)

        professions = _distinct(d.profession for d in doctors)
        if not professions:
            return OutboundMessage.plain(NO_CATEGORIES_TEXT)

        tokens = [CallbackToken.for_category(ByName(p)) for p in professions]
        return self._menu(PICK_PROFESSION_TEXT, tokens, lambda t: t.selector.profession, NO_CATEGORIES_TEXT)

    async def _category_menu(self) -> OutboundMessage:
        try:
            categories = await self.upstream.list_categories()
        except UpstreamUnavailable as e:
            logger.error("[%s] category menu: %s", self.identity, e)
            return OutboundMessage.plain(CATEGORIES_ERROR_TEXT)

        if not categories:
            return OutboundMessage.plain(NO_CATEGORIES_TEXT)

        names = {c.id: c.name or str(c.id) for c in categories}
        tokens = [CallbackToken.for_category(ById(c.id)) for c in categories]
        return self._menu(PICK_CATEGORY_TEXT, tokens, lambda t: names[t.selector.category_id], NO_CATEGORIES_TEXT)

    async def _clinic_info(self) -> OutboundMessage:
        try:
            branches = await self.upstream.list_branches()
        except UpstreamUnavailable as e:
            logger.error("[%s] clinic info: %s", self.identity, e)
            return OutboundMessage.plain(BRANCHES_ERROR_TEXT)

        if not branches:
            return OutboundMessage.plain(NO_BRANCHES_TEXT)

        lines = [BRANCHES_HEADER, *(b.display_line() for b in branches)]
        return OutboundMessage.plain("\n".join(lines))

    def _profile(self, user_id: int) -> OutboundMessage:
        if not self.profiles.available:
            logger.error("[%s] my profile: %s", self.identity, self.profiles.load_error)
            return OutboundMessage.plain(USERS_ERROR_TEXT)

        user = self.profiles.get(user_id)
        if user is None:
            return OutboundMessage.plain(PROFILE_NOT_FOUND_TEXT)
        return OutboundMessage.plain(user.display_text())

    async def _date_menu(self, token: CallbackToken) -> OutboundMessage:
        selector = token.selector
        try:
            if isinstance(selector, ById):
                availability = await self.upstream.list_availability(selector.category_id)
                dates = _distinct(a.date for a in availability)
            else:
                slots = await self.upstream.list_doctor_times()
                dates = _distinct(s.date for s in slots)
        except UpstreamUnavailable as e:
            logger.error("[%s] dates for %s: %s", self.identity, token.category, e)
            return OutboundMessage.plain(DATES_ERROR_TEXT)

        if not dates:
            return OutboundMessage.plain(NO_DATES_TEXT)

        return self._menu(PICK_DATE_TEXT, [token.with_date(d) for d in dates], lambda t: t.date, NO_DATES_TEXT)

    async def _time_menu(self, token: CallbackToken) -> OutboundMessage:
        try:
            if isinstance(token.selector, ById):
                ranges = _distinct(await self.upstream.list_timeslots(token.date))
            else:
                slots = await self.upstream.list_doctor_times()
                ranges = _distinct(s.time_range for s in slots if s.date == token.date)
        except UpstreamUnavailable as e:
            logger.error("[%s] times for %s on %s: %s", self.identity, token.category, token.date, e)
            return OutboundMessage.plain(TIMES_ERROR_TEXT)

        tokens = [token.with_time(r) for r in ranges]
        if self.reservations is not None:
            tokens = [t for t in tokens if not self.reservations.is_reserved(t.slot_key)]

        if not tokens:
            return OutboundMessage.plain(NO_TIMES_TEXT)

        return self._menu(PICK_TIME_TEXT, tokens, lambda t: t.time_range, NO_TIMES_TEXT)

    async def _confirm(self, token: CallbackToken, user_id: Optional[int]) -> OutboundMessage:
        if self.reservations is not None:
            try:
                await self.reservations.reserve_or_raise(token.slot_key, holder=user_id)
            except SlotUnavailableError as e:
                logger.info("[%s] %s", self.identity, e)
                return OutboundMessage.plain(SLOT_TAKEN_TEXT)

        return OutboundMessage.plain(
            CONFIRM_TEMPLATE.format(
                category=token.category,
                date=token.date,
                time=token.time_range,
            )
        )
