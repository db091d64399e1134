# cosmic_social/infrastructure/event_handlers.py
import logging

from cosmic_social.domain.entities import Notification
from cosmic_social.domain.enums import EntityType, NotificationType
from cosmic_social.domain.events import (
    MessageReacted,
    MessageSent,
    PostCommented,
    UserFollowed,
    UserMentioned,
)
from cosmic_social.domain.factories import create_notification
from cosmic_social.domain.notifications import is_notification_enabled
from cosmic_social.domain.validators import validate_notification
from cosmic_social.gateways.interfaces import INotificationGateway


class NotificationHandlers:
    """Turns social events into notifications for the affected user."""

    def __init__(
        self,
        notification_gateway: INotificationGateway,
        logger: logging.Logger | None = None,
    ):
        self.notification_gateway = notification_gateway
        self.logger = logger or logging.getLogger("NotificationHandlers")

    async def notify(
        self,
        recipient_id: str,
        notification_type: NotificationType,
        actor_id: str,
        entity_id: str | None = None,
        entity_type: EntityType | None = None,
    ) -> Notification | None:
        if not validate_notification(recipient_id, notification_type, actor_id):
            self.logger.debug(
                f"Skipping {notification_type.value} notification from {actor_id} to {recipient_id}"
            )
            return None

        preferences = await self.notification_gateway.get_preferences(recipient_id)
        if not is_notification_enabled(preferences, notification_type):
            self.logger.debug(
                f"User {recipient_id} has {notification_type.value} notifications turned off"
            )
            return None

        notification = create_notification(
            recipient_id, notification_type, actor_id, entity_id, entity_type
        )
        return await self.notification_gateway.create_notification(notification)

    async def on_user_followed(self, event: UserFollowed):
        await self.notify(
            event.following_id, NotificationType.FOLLOW, event.follower_id
        )

    async def on_message_sent(self, event: MessageSent):
        await self.notify(
            event.recipient_id,
            NotificationType.MESSAGE,
            event.sender_id,
            event.message_id,
            EntityType.MESSAGE,
        )

    async def on_message_reacted(self, event: MessageReacted):
        await self.notify(
            event.author_id,
            NotificationType.REACTION,
            event.user_id,
            event.message_id,
            EntityType.MESSAGE,
        )

    async def on_post_commented(self, event: PostCommented):
        await self.notify(
            event.post_author_id,
            NotificationType.COMMENT,
            event.author_id,
            event.comment_id,
            EntityType.COMMENT,
        )

    async def on_user_mentioned(self, event: UserMentioned):
        await self.notify(
            event.mentioned_id,
            NotificationType.MENTION,
            event.actor_id,
            event.post_id,
            EntityType.POST,
        )
