# cosmic_social/tests/unit/test_message_interactor.py
from datetime import UTC, datetime
from unittest.mock import Mock

import pytest

from cosmic_social.domain.events import MessageReacted, MessageSent
from cosmic_social.domain.factories import (
    create_message,
    create_message_thread,
    create_thread,
)
from cosmic_social.domain.updaters import add_reaction
from cosmic_social.gateways.interfaces import IMessageGateway
from cosmic_social.infrastructure.event_dispatcher import EventDispatcher
from cosmic_social.interactors.message_interactor import MessageInteractor


@pytest.fixture
def mock_message_gateway():
    gateway = Mock(spec=IMessageGateway)
    gateway.send_message.side_effect = lambda message: message
    gateway.create_thread.side_effect = lambda thread: thread
    return gateway


@pytest.fixture
def mock_event_dispatcher():
    return Mock(spec=EventDispatcher)


@pytest.fixture
def message_interactor(mock_message_gateway, mock_event_dispatcher):
    return MessageInteractor(mock_message_gateway, mock_event_dispatcher)


@pytest.fixture
def thread():
    return create_thread(["u1", "u2", "u3"])


class TestMessageInteractor:
    @pytest.mark.asyncio
    async def test_send_message_notifies_other_participants(
        self, message_interactor, mock_event_dispatcher, thread
    ):
        message = await message_interactor.send_message(thread, "u1", "Om shanti")

        assert message.read_by == ("u1",)
        events = [c.args[0] for c in mock_event_dispatcher.dispatch.call_args_list]
        assert events == [
            MessageSent(message_id=message.id, thread_id=thread.id, sender_id="u1", recipient_id="u2"),
            MessageSent(message_id=message.id, thread_id=thread.id, sender_id="u1", recipient_id="u3"),
        ]

    @pytest.mark.asyncio
    async def test_send_invalid_message(self, message_interactor, mock_message_gateway, thread):
        assert await message_interactor.send_message(thread, "u1", "x" * 1001) is None
        assert await message_interactor.send_message(thread, "u1", "", "voice") is None
        mock_message_gateway.send_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_start_thread_deduplicates(self, message_interactor, mock_message_gateway):
        thread = await message_interactor.start_thread(["u1", "u2", "u1"])

        assert thread.participants == ("u1", "u2")
        mock_message_gateway.create_thread.assert_called_once()

    @pytest.mark.asyncio
    async def test_start_empty_thread(self, message_interactor, mock_message_gateway):
        assert await message_interactor.start_thread([]) is None
        mock_message_gateway.create_thread.assert_not_called()

    @pytest.mark.asyncio
    async def test_react_replaces_previous_reaction(
        self, message_interactor, mock_message_gateway, mock_event_dispatcher
    ):
        message = add_reaction(create_message("t1", "u1", "hello"), "u2", "🙏")

        updated = await message_interactor.react(message, "u2", "✨")

        assert [(r.user_id, r.emoji) for r in updated.reactions] == [("u2", "✨")]
        mock_message_gateway.add_reaction.assert_called_once_with(message.id, "u2", "✨")
        mock_event_dispatcher.dispatch.assert_called_once_with(
            MessageReacted(message_id=message.id, user_id="u2", author_id="u1", emoji="✨")
        )

    @pytest.mark.asyncio
    async def test_remove_missing_reaction_skips_api(self, message_interactor, mock_message_gateway):
        message = create_message("t1", "u1", "hello")

        assert await message_interactor.remove_reaction(message, "u2") is message
        mock_message_gateway.remove_reaction.assert_not_called()

    @pytest.mark.asyncio
    async def test_mark_as_read_only_once(self, message_interactor, mock_message_gateway):
        message = create_message("t1", "u1", "hello")

        once = await message_interactor.mark_as_read(message, "u2")
        twice = await message_interactor.mark_as_read(once, "u2")

        assert twice == once
        assert once.read_by == ("u1", "u2")
        mock_message_gateway.mark_as_read.assert_called_once_with(message.id, "u2")

    @pytest.mark.asyncio
    async def test_threads_newest_first(self, message_interactor, mock_message_gateway):
        old = create_thread(["u1", "u2"]).model_copy(
            update={"updated_at": datetime(2024, 1, 1, tzinfo=UTC)}
        )
        new = create_thread(["u1", "u3"]).model_copy(
            update={"updated_at": datetime(2024, 2, 1, tzinfo=UTC)}
        )
        mock_message_gateway.get_threads.return_value = [
            create_message_thread(old, create_message(old.id, "u2", "hi")),
            create_message_thread(new, create_message(new.id, "u3", "hey")),
        ]

        threads = await message_interactor.get_threads("u1")

        assert [t.id for t in threads] == [new.id, old.id]
