import json
import pytest

from care360_bot.core.enums import Command
from care360_bot.core.models.messages import CallbackEvent, CommandEvent
from care360_bot.utils.event_log import get_log_path, log_event, set_log_path


def read_events(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


def test_disabled_by_default(tmp_path):
    assert get_log_path() is None
    log_event("command", {"command": "start"})
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_dispatches_are_logged(tmp_path, dispatcher):
    log_file = tmp_path / "logs" / "events.jsonl"
    set_log_path(log_file)

    await dispatcher.handle(CommandEvent(command=Command.BOOK, user_id=42, chat_id=100))
    await dispatcher.handle(CallbackEvent(payload="date:Cardiology:2024-05-01", chat_id=100))
    await dispatcher.handle(CallbackEvent(payload="bogus:xyz", chat_id=100))

    events = read_events(get_log_path())
    assert [e["event"] for e in events] == ["command", "callback", "callback"]
    assert events[0]["command"] == "book"
    assert events[0]["buttons"] == 2
    assert events[1]["stage"] == "select_time"
    assert events[2]["stage"] is None
    assert all(e["identity"] == "123:***" for e in events)
