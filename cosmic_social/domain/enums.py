# cosmic_social/domain/enums.py
from enum import Enum


class PostContentType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"


class MessageContentType(str, Enum):
    TEXT = "text"
    VOICE = "voice"
    IMAGE = "image"


class SortBy(str, Enum):
    RECENT = "recent"
    POPULAR = "popular"
    RELEVANT = "relevant"


class FollowAction(str, Enum):
    FOLLOW = "follow"
    UNFOLLOW = "unfollow"


class FollowTarget(str, Enum):
    """Which side of the relationship a FollowStats counter tracks."""

    FOLLOWER = "follower"
    FOLLOWING = "following"


class NotificationType(str, Enum):
    FOLLOW = "follow"
    MESSAGE = "message"
    MENTION = "mention"
    COMMENT = "comment"
    REACTION = "reaction"


class EntityType(str, Enum):
    POST = "post"
    COMMENT = "comment"
    MESSAGE = "message"
