# cosmic_social/gateways/interfaces.py
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from cosmic_social.domain.entities import (
    Badge,
    Comment,
    FeedFilter,
    FeedItem,
    Follow,
    FollowStats,
    Like,
    Message,
    MessageThread,
    Notification,
    NotificationPreferences,
    Post,
    Thread,
    UserProfile,
    UserSuggestion,
)
from cosmic_social.domain.enums import NotificationType


class IFeedGateway(ABC):
    @abstractmethod
    async def get_feed(
        self, user_id: str, feed_filter: FeedFilter, page: int = 1, limit: int = 20
    ) -> list[FeedItem]:
        pass

    @abstractmethod
    async def get_discover_feed(
        self, user_id: str, page: int = 1, limit: int = 20
    ) -> list[FeedItem]:
        pass

    @abstractmethod
    async def create_post(self, post: Post) -> Post:
        pass

    @abstractmethod
    async def like_post(self, post_id: str, user_id: str) -> Like:
        pass

    @abstractmethod
    async def unlike_post(self, post_id: str, user_id: str) -> None:
        pass

    @abstractmethod
    async def comment_on_post(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    async def get_comments(
        self, post_id: str, page: int = 1, limit: int = 10
    ) -> list[Comment]:
        pass

    @abstractmethod
    async def share_post(self, post_id: str, user_id: str) -> None:
        pass

    @abstractmethod
    async def delete_post(self, post_id: str, author_id: str) -> None:
        pass

    @abstractmethod
    async def report_post(self, post_id: str, reporter_id: str, reason: str) -> None:
        pass


class IFollowGateway(ABC):
    @abstractmethod
    async def follow_user(self, follow: Follow) -> Follow:
        pass

    @abstractmethod
    async def unfollow_user(self, follower_id: str, following_id: str) -> None:
        pass

    @abstractmethod
    async def get_follow_stats(self, user_id: str) -> FollowStats:
        pass

    @abstractmethod
    async def get_followers(
        self, user_id: str, page: int = 1, limit: int = 20
    ) -> list[UserProfile]:
        pass

    @abstractmethod
    async def get_following(
        self, user_id: str, page: int = 1, limit: int = 20
    ) -> list[UserProfile]:
        pass

    @abstractmethod
    async def is_following(self, follower_id: str, following_id: str) -> bool:
        pass

    @abstractmethod
    async def get_mutual_connections(
        self, user_id: str, other_user_id: str
    ) -> list[UserProfile]:
        pass

    @abstractmethod
    async def get_user_suggestions(
        self, user_id: str, limit: int = 10
    ) -> list[UserSuggestion]:
        pass

    @abstractmethod
    async def get_suggestions_based_on_interests(
        self, user_id: str, interests: list[str], limit: int = 10
    ) -> list[UserSuggestion]:
        pass

    @abstractmethod
    async def get_suggestions_based_on_mutual_connections(
        self, user_id: str, limit: int = 10
    ) -> list[UserSuggestion]:
        pass


class IMessageGateway(ABC):
    @abstractmethod
    async def get_threads(self, user_id: str) -> list[MessageThread]:
        pass

    @abstractmethod
    async def get_thread(self, thread_id: str) -> Thread:
        pass

    @abstractmethod
    async def get_messages(
        self, thread_id: str, page: int = 1, limit: int = 50
    ) -> list[Message]:
        pass

    @abstractmethod
    async def send_message(self, message: Message) -> Message:
        pass

    @abstractmethod
    async def create_thread(self, thread: Thread) -> Thread:
        pass

    @abstractmethod
    async def mark_as_read(self, message_id: str, user_id: str) -> None:
        pass

    @abstractmethod
    async def add_reaction(self, message_id: str, user_id: str, emoji: str) -> None:
        pass

    @abstractmethod
    async def remove_reaction(self, message_id: str, user_id: str) -> None:
        pass


class INotificationGateway(ABC):
    @abstractmethod
    async def get_notifications(
        self, user_id: str, page: int = 1, limit: int = 20
    ) -> list[Notification]:
        pass

    @abstractmethod
    async def get_notifications_by_type(
        self,
        user_id: str,
        notification_type: NotificationType,
        page: int = 1,
        limit: int = 20,
    ) -> list[Notification]:
        pass

    @abstractmethod
    async def get_unread_count(self, user_id: str) -> int:
        pass

    @abstractmethod
    async def create_notification(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def mark_as_read(self, notification_id: str) -> None:
        pass

    @abstractmethod
    async def mark_all_as_read(self, user_id: str) -> None:
        pass

    @abstractmethod
    async def delete_notification(self, notification_id: str) -> None:
        pass

    @abstractmethod
    async def get_preferences(self, user_id: str) -> NotificationPreferences:
        pass

    @abstractmethod
    async def update_preferences(
        self, user_id: str, preferences: Mapping[str, Any]
    ) -> NotificationPreferences:
        pass


class IProfileGateway(ABC):
    @abstractmethod
    async def get_profile(self, user_id: str) -> UserProfile:
        pass

    @abstractmethod
    async def update_profile(self, profile: UserProfile) -> UserProfile:
        pass

    @abstractmethod
    async def generate_cosmic_avatar(
        self, user_id: str, birth_chart: Mapping[str, Any]
    ) -> str:
        pass

    @abstractmethod
    async def add_badge(self, user_id: str, badge_id: str) -> Badge:
        pass

    @abstractmethod
    async def get_user_suggestions(
        self, user_id: str, limit: int = 10
    ) -> list[UserSuggestion]:
        pass

    @abstractmethod
    async def search_profiles(
        self, query: str, filters: Mapping[str, Any] | None = None
    ) -> list[UserProfile]:
        pass
