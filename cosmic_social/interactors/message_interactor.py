# cosmic_social/interactors/message_interactor.py
import logging
from collections.abc import Iterable

from cosmic_social.domain.entities import Message, MessageThread, Thread
from cosmic_social.domain.enums import MessageContentType
from cosmic_social.domain.events import MessageReacted, MessageSent
from cosmic_social.domain.factories import create_message, create_thread
from cosmic_social.domain.updaters import add_reaction, mark_message_as_read, remove_reaction
from cosmic_social.domain.validators import validate_message
from cosmic_social.gateways.interfaces import IMessageGateway
from cosmic_social.infrastructure.event_dispatcher import EventDispatcher


class MessageInteractor:
    def __init__(
        self,
        message_gateway: IMessageGateway,
        event_dispatcher: EventDispatcher,
        logger: logging.Logger | None = None,
    ):
        self.message_gateway = message_gateway
        self.event_dispatcher = event_dispatcher
        self.logger = logger or logging.getLogger("MessageInteractor")

    async def get_threads(self, user_id: str) -> list[MessageThread]:
        threads = await self.message_gateway.get_threads(user_id)
        return sorted(threads, key=lambda t: t.updated_at, reverse=True)

    async def start_thread(self, participants: Iterable[str]) -> Thread | None:
        thread = create_thread(participants)
        if not thread.participants:
            return None
        return await self.message_gateway.create_thread(thread)

    async def send_message(
        self,
        thread: Thread,
        sender_id: str,
        content: str,
        content_type: MessageContentType = MessageContentType.TEXT,
        media_url: str | None = None,
    ) -> Message | None:
        if not validate_message(content, content_type):
            self.logger.warning(f"Rejected message from {sender_id} in {thread.id}")
            return None

        message = await self.message_gateway.send_message(
            create_message(
                thread.id, sender_id, content, MessageContentType(content_type), media_url
            )
        )
        for participant in thread.participants:
            if participant == sender_id:
                continue
            await self.event_dispatcher.dispatch(
                MessageSent(
                    message_id=message.id,
                    thread_id=thread.id,
                    sender_id=sender_id,
                    recipient_id=participant,
                )
            )
        return message

    async def react(self, message: Message, user_id: str, emoji: str) -> Message:
        updated = add_reaction(message, user_id, emoji)
        await self.message_gateway.add_reaction(message.id, user_id, emoji)
        await self.event_dispatcher.dispatch(
            MessageReacted(
                message_id=message.id,
                user_id=user_id,
                author_id=message.sender_id,
                emoji=emoji,
            )
        )
        return updated

    async def remove_reaction(self, message: Message, user_id: str) -> Message:
        updated = remove_reaction(message, user_id)
        if updated is not message:
            await self.message_gateway.remove_reaction(message.id, user_id)
        return updated

    async def mark_as_read(self, message: Message, user_id: str) -> Message:
        updated = mark_message_as_read(message, user_id)
        if updated is not message:
            await self.message_gateway.mark_as_read(message.id, user_id)
        return updated
