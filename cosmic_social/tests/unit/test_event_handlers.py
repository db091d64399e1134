# cosmic_social/tests/unit/test_event_handlers.py
from unittest.mock import Mock

import pytest

from cosmic_social.domain.entities import NotificationPreferences
from cosmic_social.domain.enums import EntityType, NotificationType
from cosmic_social.domain.events import (
    MessageReacted,
    MessageSent,
    PostCommented,
    UserFollowed,
    UserMentioned,
)
from cosmic_social.gateways.interfaces import INotificationGateway
from cosmic_social.infrastructure.event_handlers import NotificationHandlers


@pytest.fixture
def mock_notification_gateway():
    gateway = Mock(spec=INotificationGateway)
    gateway.get_preferences.side_effect = lambda user_id: NotificationPreferences(
        user_id=user_id
    )
    gateway.create_notification.side_effect = lambda notification: notification
    return gateway


@pytest.fixture
def handlers(mock_notification_gateway):
    return NotificationHandlers(mock_notification_gateway)


def created(gateway):
    gateway.create_notification.assert_called_once()
    return gateway.create_notification.call_args.args[0]


@pytest.mark.asyncio
async def test_follow_notifies_followed_user(handlers, mock_notification_gateway):
    await handlers.on_user_followed(
        UserFollowed(follower_id="u1", following_id="u2", follow_id="u1-u2")
    )

    notification = created(mock_notification_gateway)
    assert notification.recipient_id == "u2"
    assert notification.actor_id == "u1"
    assert notification.type is NotificationType.FOLLOW
    assert notification.read is False


@pytest.mark.asyncio
async def test_message_sent(handlers, mock_notification_gateway):
    await handlers.on_message_sent(
        MessageSent(message_id="m1", thread_id="t1", sender_id="u1", recipient_id="u2")
    )

    notification = created(mock_notification_gateway)
    assert notification.type is NotificationType.MESSAGE
    assert notification.entity_id == "m1"
    assert notification.entity_type is EntityType.MESSAGE


@pytest.mark.asyncio
async def test_reaction_notifies_message_author(handlers, mock_notification_gateway):
    await handlers.on_message_reacted(
        MessageReacted(message_id="m1", user_id="u2", author_id="u1", emoji="🙏")
    )

    notification = created(mock_notification_gateway)
    assert notification.recipient_id == "u1"
    assert notification.type is NotificationType.REACTION


@pytest.mark.asyncio
async def test_mention(handlers, mock_notification_gateway):
    await handlers.on_user_mentioned(
        UserMentioned(mentioned_id="u3", actor_id="u1", post_id="p1")
    )

    notification = created(mock_notification_gateway)
    assert notification.type is NotificationType.MENTION
    assert notification.entity_type is EntityType.POST


@pytest.mark.asyncio
async def test_commenting_on_own_post_is_silent(handlers, mock_notification_gateway):
    await handlers.on_post_commented(
        PostCommented(post_id="p1", comment_id="c1", author_id="u1", post_author_id="u1")
    )

    mock_notification_gateway.get_preferences.assert_not_called()
    mock_notification_gateway.create_notification.assert_not_called()


@pytest.mark.asyncio
async def test_disabled_preference_skips_notification(handlers, mock_notification_gateway):
    mock_notification_gateway.get_preferences.side_effect = None
    mock_notification_gateway.get_preferences.return_value = NotificationPreferences(
        user_id="u2", comment_notifications=False
    )

    result = await handlers.notify("u2", NotificationType.COMMENT, "u1", "c1", EntityType.COMMENT)

    assert result is None
    mock_notification_gateway.get_preferences.assert_called_once_with("u2")
    mock_notification_gateway.create_notification.assert_not_called()
