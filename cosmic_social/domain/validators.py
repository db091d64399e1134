# cosmic_social/domain/validators.py
"""Content constraints for posts, comments, messages, profiles and follows.

Every validator is a predicate: invalid input yields ``False``, never an
exception. Media content (image, video, voice) is an opaque URL or identifier
and only has to be non-empty.
"""
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar, assert_never

from cosmic_social.domain.entities import UserProfile
from cosmic_social.domain.enums import (
    MessageContentType,
    NotificationType,
    PostContentType,
)

POST_MAX_LENGTH = 2000
COMMENT_MAX_LENGTH = 2000
MESSAGE_MAX_LENGTH = 1000
DISPLAY_NAME_MIN_LENGTH = 2
DISPLAY_NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500

EnumT = TypeVar("EnumT", bound=Enum)


def _coerce(enum_cls: type[EnumT], value: Any) -> EnumT | None:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _valid_text(content: str, max_length: int) -> bool:
    return len(content.strip()) > 0 and len(content) <= max_length


def validate_post(content: str, content_type: PostContentType | str) -> bool:
    kind = _coerce(PostContentType, content_type)
    if kind is None:
        return False
    if kind is PostContentType.TEXT:
        return _valid_text(content, POST_MAX_LENGTH)
    if kind is PostContentType.IMAGE or kind is PostContentType.VIDEO:
        return len(content) > 0
    assert_never(kind)


def validate_comment(content: str) -> bool:
    return _valid_text(content, COMMENT_MAX_LENGTH)


def validate_message(content: str, content_type: MessageContentType | str) -> bool:
    kind = _coerce(MessageContentType, content_type)
    if kind is None:
        return False
    if kind is MessageContentType.TEXT:
        return _valid_text(content, MESSAGE_MAX_LENGTH)
    if kind is MessageContentType.VOICE or kind is MessageContentType.IMAGE:
        return len(content) > 0
    assert_never(kind)


def _profile_field(profile: Mapping[str, Any], name: str, alias: str) -> Any:
    if name in profile:
        return profile[name]
    return profile.get(alias)


def validate_profile(profile: UserProfile | Mapping[str, Any]) -> bool:
    """Check a full profile or a partial mapping (snake_case or camelCase keys)."""
    if isinstance(profile, UserProfile):
        user_id = profile.user_id
        display_name = profile.display_name
        bio = profile.spiritual_bio
    else:
        user_id = _profile_field(profile, "user_id", "userId")
        display_name = _profile_field(profile, "display_name", "displayName")
        bio = _profile_field(profile, "spiritual_bio", "spiritualBio")

    if not user_id or not display_name:
        return False
    if not DISPLAY_NAME_MIN_LENGTH <= len(display_name) <= DISPLAY_NAME_MAX_LENGTH:
        return False
    if bio and len(bio) > BIO_MAX_LENGTH:
        return False
    return True


def validate_follow_action(follower_id: str, following_id: str) -> bool:
    if not follower_id or not following_id:
        return False
    return follower_id != following_id


def validate_notification(
    recipient_id: str | None,
    notification_type: NotificationType | str | None,
    actor_id: str | None,
) -> bool:
    if not recipient_id or not actor_id or notification_type is None:
        return False
    if _coerce(NotificationType, notification_type) is None:
        return False
    # nobody is notified about their own actions
    return recipient_id != actor_id
