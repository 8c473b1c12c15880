"""
Telegram transport: one polling Application per bot identity.
"""

import asyncio
from typing import Optional

from telegram import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    Update,
)
from telegram.error import TelegramError
from telegram.ext import Application, CallbackQueryHandler, ContextTypes, MessageHandler, filters

from ...core.enums import Command, MenuKind
from ...core.models.callback import CALLBACK_DATA_LIMIT
from ...core.models.messages import CallbackEvent, CommandEvent, InboundEvent, OutboundMessage
from ...utils.logging import get_logger, mask_token
from ...utils.text import split_text, utf8_length
from ..booking import BookingDispatcher

logger = get_logger("care360.telegram")

ALLOWED_UPDATES = ["message", "callback_query"]


def event_from_update(update: Update) -> Optional[InboundEvent]:
    """Convert a Telegram update into a dispatcher event; None for anything the bot ignores."""
    query = update.callback_query
    if query is not None:
        if not query.data or query.message is None:
            return None
        return CallbackEvent(
            payload=query.data,
            chat_id=query.message.chat.id,
            user_id=query.from_user.id if query.from_user else None,
        )

    message = update.message
    if message is None or not message.text:
        return None

    command = Command.from_text(message.text)
    if command is None:
        return None

    user_id = message.from_user.id if message.from_user else message.chat.id
    return CommandEvent(command=command, user_id=user_id, chat_id=message.chat.id)


def build_reply_markup(message: OutboundMessage, identity: str = "-"):
    """Render the message's button grid as a Telegram keyboard."""
    if not message.buttons:
        return None

    if message.menu == MenuKind.REPLY:
        return ReplyKeyboardMarkup(
            [[KeyboardButton(b.label) for b in row] for row in message.buttons],
            resize_keyboard=True,
        )

    rows = []
    for row in message.buttons:
        kept = []
        for button in row:
            if button.payload is None or utf8_length(button.payload) > CALLBACK_DATA_LIMIT:
                logger.warning("[%s] Dropping button %r: callback data unusable", identity, button.label)
                continue
            kept.append(InlineKeyboardButton(button.label, callback_data=button.payload))
        if kept:
            rows.append(kept)

    return InlineKeyboardMarkup(rows) if rows else None


class TelegramTransport:
    """Receives updates for one bot token and forwards them to its dispatcher."""

    def __init__(self, token: str, dispatcher: BookingDispatcher, *, poll_timeout: int = 60):
        self.token = token
        self.identity = mask_token(token)
        self.dispatcher = dispatcher
        self.poll_timeout = poll_timeout

    def build_application(self) -> Application:
        # Updates for one identity are handled strictly one at a time, in arrival order
        application = Application.builder().token(self.token).concurrent_updates(False).build()
        application.add_handler(CallbackQueryHandler(self.on_callback))
        application.add_handler(MessageHandler(filters.TEXT, self.on_message))
        application.add_error_handler(self.on_error)
        return application

    async def run(self) -> None:
        """Poll until cancelled."""
        application = self.build_application()
        async with application:
            await application.start()
            await application.updater.start_polling(
                timeout=self.poll_timeout,
                allowed_updates=ALLOWED_UPDATES,
            )
            logger.info("[%s] Authorized as @%s", self.identity, application.bot.username)
            try:
                await asyncio.Event().wait()
            finally:
                await application.updater.stop()
                await application.stop()

    async def on_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self.process(update, context.bot)

    async def on_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        # Stop the client-side spinner before the upstream round trip
        try:
            await update.callback_query.answer()
        except TelegramError as e:
            logger.warning("[%s] Could not answer callback query: %s", self.identity, e)
        await self.process(update, context.bot)

    async def process(self, update: Update, bot) -> None:
        event = event_from_update(update)
        if event is None:
            return
        message = await self.dispatcher.handle(event)
        await self.send(bot, event.chat_id, message)

    async def send(self, bot, chat_id: int, message: OutboundMessage) -> None:
        """Send text, splitting long texts; the keyboard goes with the last chunk."""
        markup = build_reply_markup(message, self.identity)
        chunks = split_text(message.text)
        for index, chunk in enumerate(chunks):
            is_last = index == len(chunks) - 1
            await bot.send_message(
                chat_id=chat_id,
                text=chunk,
                reply_markup=markup if is_last else None,
            )

    async def on_error(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        logger.error(
            "[%s] Error while handling update: %s",
            self.identity,
            context.error,
            exc_info=context.error,
        )
