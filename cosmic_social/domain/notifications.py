# cosmic_social/domain/notifications.py
from collections.abc import Collection, Iterable
from typing import assert_never

from cosmic_social.domain.entities import Notification, NotificationPreferences
from cosmic_social.domain.enums import NotificationType


def mark_notification_as_read(notification: Notification) -> Notification:
    # read is one-way; there is no way back to unread
    if notification.read:
        return notification
    return notification.model_copy(update={"read": True})


def mark_all_as_read(notifications: Iterable[Notification]) -> list[Notification]:
    return [mark_notification_as_read(n) for n in notifications]


def filter_by_type(
    notifications: Iterable[Notification], types: Collection[NotificationType | str]
) -> list[Notification]:
    wanted = {NotificationType(t) for t in types}
    return [n for n in notifications if n.type in wanted]


def get_unread_count(notifications: Iterable[Notification]) -> int:
    return sum(1 for n in notifications if not n.read)


def sort_by_date(
    notifications: Iterable[Notification], ascending: bool = False
) -> list[Notification]:
    return sorted(notifications, key=lambda n: n.created_at, reverse=not ascending)


def is_notification_enabled(
    preferences: NotificationPreferences, notification_type: NotificationType | str
) -> bool:
    kind = NotificationType(notification_type)
    if kind is NotificationType.FOLLOW:
        return preferences.follow_notifications
    if kind is NotificationType.MESSAGE:
        return preferences.message_notifications
    if kind is NotificationType.MENTION:
        return preferences.mention_notifications
    if kind is NotificationType.COMMENT:
        return preferences.comment_notifications
    if kind is NotificationType.REACTION:
        return preferences.reaction_notifications
    assert_never(kind)
