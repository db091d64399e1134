# cosmic_social/gateways/message_gateway.py
from cosmic_social.domain.entities import Message, MessageThread, Thread
from cosmic_social.gateways.interfaces import IMessageGateway
from cosmic_social.infrastructure.api_client import ApiClient, to_payload


class MessageGateway(IMessageGateway):
    def __init__(self, api_client: ApiClient, prefix: str = "/api/messages"):
        self.api_client = api_client
        self.prefix = prefix

    async def get_threads(self, user_id: str) -> list[MessageThread]:
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/threads/{user_id}"
        )
        return [MessageThread.model_validate(thread) for thread in data]

    async def get_thread(self, thread_id: str) -> Thread:
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/thread/{thread_id}"
        )
        return Thread.model_validate(data)

    async def get_messages(
        self, thread_id: str, page: int = 1, limit: int = 50
    ) -> list[Message]:
        data = await self.api_client.request_data(
            "GET",
            f"{self.prefix}/thread/{thread_id}/messages",
            params={"page": page, "limit": limit},
        )
        return [Message.model_validate(message) for message in data]

    async def send_message(self, message: Message) -> Message:
        data = await self.api_client.request_data(
            "POST", f"{self.prefix}/send", json=to_payload(message)
        )
        return Message.model_validate(data)

    async def create_thread(self, thread: Thread) -> Thread:
        data = await self.api_client.request_data(
            "POST", f"{self.prefix}/thread", json=to_payload(thread)
        )
        return Thread.model_validate(data)

    async def mark_as_read(self, message_id: str, user_id: str) -> None:
        await self.api_client.request_data(
            "PUT", f"{self.prefix}/{message_id}/read", json={"userId": user_id}
        )

    async def add_reaction(self, message_id: str, user_id: str, emoji: str) -> None:
        await self.api_client.request_data(
            "POST",
            f"{self.prefix}/{message_id}/reaction",
            json={"userId": user_id, "emoji": emoji},
        )

    async def remove_reaction(self, message_id: str, user_id: str) -> None:
        await self.api_client.request_data(
            "DELETE", f"{self.prefix}/{message_id}/reaction/{user_id}"
        )
