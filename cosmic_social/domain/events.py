# cosmic_social/domain/events.py
from pydantic import BaseModel


class Event(BaseModel):
    pass


class UserFollowed(Event):
    follower_id: str
    following_id: str
    follow_id: str


class MessageSent(Event):
    message_id: str
    thread_id: str
    sender_id: str
    recipient_id: str


class MessageReacted(Event):
    message_id: str
    user_id: str
    author_id: str
    emoji: str


class PostCommented(Event):
    post_id: str
    comment_id: str
    author_id: str
    post_author_id: str


class UserMentioned(Event):
    mentioned_id: str
    actor_id: str
    post_id: str
