# cosmic_social/gateways/notification_gateway.py
from collections.abc import Mapping
from typing import Any

from cosmic_social.domain.entities import Notification, NotificationPreferences
from cosmic_social.domain.enums import NotificationType
from cosmic_social.gateways.interfaces import INotificationGateway
from cosmic_social.infrastructure.api_client import ApiClient, to_payload


class NotificationGateway(INotificationGateway):
    def __init__(self, api_client: ApiClient, prefix: str = "/api/notifications"):
        self.api_client = api_client
        self.prefix = prefix

    async def get_notifications(
        self, user_id: str, page: int = 1, limit: int = 20
    ) -> list[Notification]:
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/{user_id}", params={"page": page, "limit": limit}
        )
        return [Notification.model_validate(n) for n in data]

    async def get_notifications_by_type(
        self,
        user_id: str,
        notification_type: NotificationType,
        page: int = 1,
        limit: int = 20,
    ) -> list[Notification]:
        kind = NotificationType(notification_type).value
        data = await self.api_client.request_data(
            "GET",
            f"{self.prefix}/{user_id}/type/{kind}",
            params={"page": page, "limit": limit},
        )
        return [Notification.model_validate(n) for n in data]

    async def get_unread_count(self, user_id: str) -> int:
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/{user_id}/unread-count"
        )
        return int(data.get("count", 0))

    async def create_notification(self, notification: Notification) -> Notification:
        data = await self.api_client.request_data(
            "POST", self.prefix, json=to_payload(notification)
        )
        return Notification.model_validate(data)

    async def mark_as_read(self, notification_id: str) -> None:
        await self.api_client.request_data(
            "PUT", f"{self.prefix}/{notification_id}/read"
        )

    async def mark_all_as_read(self, user_id: str) -> None:
        await self.api_client.request_data("PUT", f"{self.prefix}/{user_id}/read-all")

    async def delete_notification(self, notification_id: str) -> None:
        await self.api_client.request_data("DELETE", f"{self.prefix}/{notification_id}")

    async def get_preferences(self, user_id: str) -> NotificationPreferences:
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/{user_id}/preferences"
        )
        return NotificationPreferences.model_validate(data)

    async def update_preferences(
        self, user_id: str, preferences: Mapping[str, Any]
    ) -> NotificationPreferences:
        data = await self.api_client.request_data(
            "PUT", f"{self.prefix}/{user_id}/preferences", json=dict(preferences)
        )
        return NotificationPreferences.model_validate(data)
