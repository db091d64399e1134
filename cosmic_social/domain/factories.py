# cosmic_social/domain/factories.py
from collections.abc import Iterable
from uuid import uuid4

from cosmic_social.domain.entities import (
    Comment,
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
    User,
    UserProfile,
    utc_now,
)
from cosmic_social.domain.enums import (
    EntityType,
    MessageContentType,
    NotificationType,
    PostContentType,
)


def new_id() -> str:
    return str(uuid4())


def create_post(
    author_id: str,
    content: str,
    content_type: PostContentType = PostContentType.TEXT,
    media_url: str | None = None,
) -> Post:
    now = utc_now()
    return Post(
        id=new_id(),
        author_id=author_id,
        content_type=content_type,
        content=content,
        media_url=media_url,
        created_at=now,
        updated_at=now,
    )


def create_feed_item(
    post: Post, like_count: int = 0, comment_count: int = 0, share_count: int = 0
) -> FeedItem:
    return FeedItem(
        id=post.id,
        author_id=post.author_id,
        content_type=post.content_type,
        content=post.content,
        media_url=post.media_url,
        like_count=like_count,
        comment_count=comment_count,
        share_count=share_count,
        created_at=post.created_at,
    )


def create_like(post_id: str, user_id: str) -> Like:
    return Like(id=new_id(), post_id=post_id, user_id=user_id, created_at=utc_now())


def create_comment(post_id: str, author_id: str, content: str) -> Comment:
    now = utc_now()
    return Comment(
        id=new_id(),
        post_id=post_id,
        author_id=author_id,
        content=content,
        created_at=now,
        updated_at=now,
    )


def create_thread(participants: Iterable[str]) -> Thread:
    now = utc_now()
    # dict keeps first-seen order
    unique = tuple(dict.fromkeys(participants))
    return Thread(id=new_id(), participants=unique, created_at=now, updated_at=now)


def create_message(
    thread_id: str,
    sender_id: str,
    content: str,
    content_type: MessageContentType = MessageContentType.TEXT,
    media_url: str | None = None,
) -> Message:
    return Message(
        id=new_id(),
        thread_id=thread_id,
        sender_id=sender_id,
        content=content,
        content_type=content_type,
        media_url=media_url,
        reactions=(),
        read_by=(sender_id,),
        created_at=utc_now(),
    )


def create_message_thread(
    thread: Thread, last_message: Message, unread_count: int = 0
) -> MessageThread:
    return MessageThread(
        id=thread.id,
        participants=thread.participants,
        last_message=last_message,
        unread_count=unread_count,
        updated_at=thread.updated_at,
    )


def follow_id(follower_id: str, following_id: str) -> str:
    return f"{follower_id}-{following_id}"


def create_follow_relationship(follower_id: str, following_id: str) -> Follow:
    return Follow(
        id=follow_id(follower_id, following_id),
        follower_id=follower_id,
        following_id=following_id,
        created_at=utc_now(),
    )


def create_notification(
    recipient_id: str,
    notification_type: NotificationType,
    actor_id: str,
    entity_id: str | None = None,
    entity_type: EntityType | None = None,
) -> Notification:
    return Notification(
        id=new_id(),
        recipient_id=recipient_id,
        type=notification_type,
        actor_id=actor_id,
        entity_id=entity_id,
        entity_type=entity_type,
        read=False,
        created_at=utc_now(),
    )


def create_default_profile(user_id: str, email: str) -> UserProfile:
    return UserProfile(
        user_id=user_id,
        display_name=email.split("@")[0],
        join_date=utc_now(),
    )


def create_default_follow_stats(user_id: str) -> FollowStats:
    return FollowStats(user_id=user_id, follower_count=0, following_count=0)


def create_default_notification_preferences(user_id: str) -> NotificationPreferences:
    return NotificationPreferences(user_id=user_id)


def create_user(user_id: str, email: str) -> User:
    now = utc_now()
    return User(
        id=user_id,
        email=email,
        profile=create_default_profile(user_id, email),
        follow_stats=create_default_follow_stats(user_id),
        notification_preferences=create_default_notification_preferences(user_id),
        created_at=now,
        updated_at=now,
    )
