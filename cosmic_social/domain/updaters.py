# cosmic_social/domain/updaters.py
"""Copy-on-write transforms over the social aggregates.

Each function returns a new value and leaves its arguments untouched. When an
action is a no-op (already read, badge already held) the input value is
returned as-is.
"""
from collections.abc import Iterable, Mapping
from typing import Any, assert_never

from cosmic_social.domain.entities import (
    Badge,
    Comment,
    FeedItem,
    FollowStats,
    Like,
    Message,
    MessageReaction,
    ProfileUpdate,
    UserProfile,
    utc_now,
)
from cosmic_social.domain.enums import FollowAction, FollowTarget
from cosmic_social.domain.factories import new_id

IMMUTABLE_PROFILE_FIELDS = ("user_id", "join_date")


def update_follow_stats(
    stats: FollowStats, action: FollowAction | str, target: FollowTarget | str
) -> FollowStats:
    """Apply one follow/unfollow to a counter, never going below zero.

    The clamp hides out-of-order events but not double counting; callers key
    idempotency on the Follow record.
    """
    action = FollowAction(action)
    target = FollowTarget(target)

    if action is FollowAction.FOLLOW:
        delta = 1
    elif action is FollowAction.UNFOLLOW:
        delta = -1
    else:
        assert_never(action)

    if target is FollowTarget.FOLLOWER:
        return stats.model_copy(
            update={"follower_count": max(0, stats.follower_count + delta)}
        )
    if target is FollowTarget.FOLLOWING:
        return stats.model_copy(
            update={"following_count": max(0, stats.following_count + delta)}
        )
    assert_never(target)


def add_reaction(message: Message, user_id: str, emoji: str) -> Message:
    reaction = MessageReaction(
        id=new_id(),
        message_id=message.id,
        user_id=user_id,
        emoji=emoji,
        created_at=utc_now(),
    )
    others = tuple(r for r in message.reactions if r.user_id != user_id)
    return message.model_copy(update={"reactions": (*others, reaction)})


def remove_reaction(message: Message, user_id: str) -> Message:
    if not any(r.user_id == user_id for r in message.reactions):
        return message
    remaining = tuple(r for r in message.reactions if r.user_id != user_id)
    return message.model_copy(update={"reactions": remaining})


def mark_message_as_read(message: Message, user_id: str) -> Message:
    if user_id in message.read_by:
        return message
    return message.model_copy(update={"read_by": (*message.read_by, user_id)})


def add_badge(profile: UserProfile, badge: Badge) -> UserProfile:
    if any(b.id == badge.id for b in profile.badges):
        return profile
    return profile.model_copy(update={"badges": (*profile.badges, badge)})


def add_interest(profile: UserProfile, interest: str) -> UserProfile:
    if interest in profile.interests:
        return profile
    return profile.model_copy(update={"interests": (*profile.interests, interest)})


def remove_interest(profile: UserProfile, interest: str) -> UserProfile:
    return profile.model_copy(
        update={"interests": tuple(i for i in profile.interests if i != interest)}
    )


def _field_names(updates: Mapping[str, Any]) -> dict[str, Any]:
    by_alias = {
        info.alias: name
        for name, info in UserProfile.model_fields.items()
        if info.alias
    }
    return {by_alias.get(key, key): value for key, value in updates.items()}


def update_profile(
    current: UserProfile, updates: ProfileUpdate | Mapping[str, Any]
) -> UserProfile:
    """Merge ``updates`` over ``current``; ``user_id`` and ``join_date`` never change.

    ``None`` means "leave as is", so it never overwrites a field. When nothing
    changes, ``current`` itself is returned.
    """
    if isinstance(updates, ProfileUpdate):
        changes = updates.model_dump(exclude_unset=True, exclude_none=True)
    else:
        changes = _field_names(updates)

    merged = current.model_dump()
    merged.update(
        (key, value)
        for key, value in changes.items()
        if key in UserProfile.model_fields and value is not None
    )
    for name in IMMUTABLE_PROFILE_FIELDS:
        merged[name] = getattr(current, name)
    updated = UserProfile.model_validate(merged)
    return current if updated == current else updated


def update_feed_item_counts(
    item: FeedItem, likes: Iterable[Like], comments: Iterable[Comment]
) -> FeedItem:
    like_count = sum(1 for like in likes if like.post_id == item.id)
    comment_count = sum(1 for comment in comments if comment.post_id == item.id)
    return item.model_copy(
        update={"like_count": like_count, "comment_count": comment_count}
    )
