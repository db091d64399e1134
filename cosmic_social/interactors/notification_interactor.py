# cosmic_social/interactors/notification_interactor.py
from collections.abc import Collection

from cosmic_social.domain.entities import Notification
from cosmic_social.domain.enums import NotificationType
from cosmic_social.domain.notifications import (
    filter_by_type,
    get_unread_count,
    mark_all_as_read,
    mark_notification_as_read,
    sort_by_date,
)
from cosmic_social.gateways.interfaces import INotificationGateway


class NotificationInteractor:
    def __init__(self, notification_gateway: INotificationGateway):
        self.notification_gateway = notification_gateway

    async def get_notifications(
        self,
        user_id: str,
        types: Collection[NotificationType] | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> list[Notification]:
        notifications = await self.notification_gateway.get_notifications(
            user_id, page, limit
        )
        if types:
            notifications = filter_by_type(notifications, types)
        return sort_by_date(notifications)

    async def get_unread_count(self, user_id: str) -> int:
        return await self.notification_gateway.get_unread_count(user_id)

    async def mark_as_read(self, notification: Notification) -> Notification:
        if notification.read:
            return notification
        await self.notification_gateway.mark_as_read(notification.id)
        return mark_notification_as_read(notification)

    async def mark_all_as_read(
        self, user_id: str, notifications: list[Notification]
    ) -> list[Notification]:
        if get_unread_count(notifications):
            await self.notification_gateway.mark_all_as_read(user_id)
        return mark_all_as_read(notifications)
