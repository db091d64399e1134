# cosmic_social/domain/entities.py
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from cosmic_social.domain.enums import (
    EntityType,
    MessageContentType,
    NotificationType,
    PostContentType,
    SortBy,
)


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Immutable record. Python code uses snake_case, the social API camelCase."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class Post(Entity):
    id: str
    author_id: str
    content_type: PostContentType = PostContentType.TEXT
    content: str
    media_url: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class FeedItem(Entity):
    id: str
    author_id: str
    content_type: PostContentType
    content: str
    media_url: str | None = None
    like_count: int = Field(0, ge=0)
    comment_count: int = Field(0, ge=0)
    share_count: int = Field(0, ge=0)
    created_at: datetime

    @property
    def engagement(self) -> int:
        return self.like_count + self.comment_count


class FeedFilter(Entity):
    sort_by: SortBy = SortBy.RECENT
    content_types: tuple[PostContentType, ...] = ()
    following_only: bool = False
    interest_tags: tuple[str, ...] = ()


class Like(Entity):
    id: str
    post_id: str
    user_id: str
    created_at: datetime = Field(default_factory=utc_now)


class Comment(Entity):
    id: str
    post_id: str
    author_id: str
    content: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Thread(Entity):
    id: str
    participants: tuple[str, ...]
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class MessageReaction(Entity):
    id: str
    message_id: str
    user_id: str
    emoji: str
    created_at: datetime = Field(default_factory=utc_now)


class Message(Entity):
    id: str
    thread_id: str
    sender_id: str
    content: str
    content_type: MessageContentType = MessageContentType.TEXT
    media_url: str | None = None
    reactions: tuple[MessageReaction, ...] = ()
    read_by: tuple[str, ...] = ()
    created_at: datetime = Field(default_factory=utc_now)


class MessageThread(Entity):
    """Inbox row: a thread with its latest message."""

    id: str
    participants: tuple[str, ...]
    last_message: Message
    unread_count: int = Field(0, ge=0)
    updated_at: datetime


class Follow(Entity):
    id: str
    follower_id: str
    following_id: str
    created_at: datetime = Field(default_factory=utc_now)


class FollowStats(Entity):
    user_id: str
    follower_count: int = Field(0, ge=0)
    following_count: int = Field(0, ge=0)


class Notification(Entity):
    id: str
    recipient_id: str
    type: NotificationType
    actor_id: str
    entity_id: str | None = None
    entity_type: EntityType | None = None
    read: bool = False
    created_at: datetime = Field(default_factory=utc_now)


class NotificationPreferences(Entity):
    user_id: str
    follow_notifications: bool = True
    message_notifications: bool = True
    mention_notifications: bool = True
    comment_notifications: bool = True
    reaction_notifications: bool = True
    email_notifications: bool = False
    push_notifications: bool = True


class AstrologicalSummary(Entity):
    sun_sign: str = ""
    moon_sign: str = ""
    ascendant: str = ""


class AyurvedicType(Entity):
    primary_dosha: str = ""
    secondary_dosha: str = ""
    # vata, pitta, kapha
    balance: tuple[float, float, float] = (0, 0, 0)


class Badge(Entity):
    id: str
    name: str
    description: str = ""
    icon_url: str = ""
    date_earned: datetime = Field(default_factory=utc_now)


class UserProfile(Entity):
    user_id: str
    display_name: str
    cosmic_avatar: str = ""
    spiritual_bio: str = ""
    join_date: datetime = Field(default_factory=utc_now)
    astrological_summary: AstrologicalSummary = AstrologicalSummary()
    ayurvedic_type: AyurvedicType = AyurvedicType()
    badges: tuple[Badge, ...] = ()
    interests: tuple[str, ...] = ()


class ProfileUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    display_name: str | None = None
    cosmic_avatar: str | None = None
    spiritual_bio: str | None = None
    astrological_summary: AstrologicalSummary | None = None
    ayurvedic_type: AyurvedicType | None = None
    badges: tuple[Badge, ...] | None = None
    interests: tuple[str, ...] | None = None


class UserSuggestion(Entity):
    user_id: str
    display_name: str
    cosmic_avatar: str = ""
    mutual_connections: int = 0
    shared_interests: tuple[str, ...] = ()
    relevance_score: float = 0


class User(Entity):
    id: str
    email: EmailStr
    profile: UserProfile
    follow_stats: FollowStats
    notification_preferences: NotificationPreferences
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
