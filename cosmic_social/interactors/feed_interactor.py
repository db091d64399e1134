# cosmic_social/interactors/feed_interactor.py
import logging
from collections.abc import Iterable
from datetime import datetime

from cosmic_social.domain.entities import Comment, FeedFilter, FeedItem, Like, Post
from cosmic_social.domain.enums import PostContentType
from cosmic_social.domain.events import PostCommented, UserMentioned
from cosmic_social.domain.factories import create_comment, create_post
from cosmic_social.domain.feed import apply_filter
from cosmic_social.domain.validators import validate_comment, validate_post
from cosmic_social.gateways.interfaces import IFeedGateway
from cosmic_social.infrastructure.event_dispatcher import EventDispatcher


class FeedInteractor:
    def __init__(
        self,
        feed_gateway: IFeedGateway,
        event_dispatcher: EventDispatcher,
        logger: logging.Logger | None = None,
    ):
        self.feed_gateway = feed_gateway
        self.event_dispatcher = event_dispatcher
        self.logger = logger or logging.getLogger("FeedInteractor")

    async def get_feed(
        self,
        user_id: str,
        feed_filter: FeedFilter,
        page: int = 1,
        limit: int = 20,
        now: datetime | None = None,
    ) -> list[FeedItem]:
        items = await self.feed_gateway.get_feed(user_id, feed_filter, page, limit)
        return apply_filter(items, feed_filter, now)

    async def create_post(
        self,
        author_id: str,
        content: str,
        content_type: PostContentType = PostContentType.TEXT,
        media_url: str | None = None,
        mentioned_ids: Iterable[str] = (),
    ) -> Post | None:
        if not validate_post(content, content_type):
            self.logger.warning(f"Rejected {content_type} post from {author_id}")
            return None

        post = await self.feed_gateway.create_post(
            create_post(author_id, content, PostContentType(content_type), media_url)
        )
        for mentioned_id in dict.fromkeys(mentioned_ids):
            await self.event_dispatcher.dispatch(
                UserMentioned(
                    mentioned_id=mentioned_id, actor_id=author_id, post_id=post.id
                )
            )
        return post

    async def comment_on_post(
        self, post: FeedItem | Post, author_id: str, content: str
    ) -> Comment | None:
        if not validate_comment(content):
            self.logger.warning(f"Rejected comment from {author_id} on {post.id}")
            return None

        comment = await self.feed_gateway.comment_on_post(
            create_comment(post.id, author_id, content)
        )
        await self.event_dispatcher.dispatch(
            PostCommented(
                post_id=post.id,
                comment_id=comment.id,
                author_id=author_id,
                post_author_id=post.author_id,
            )
        )
        return comment

    async def like_post(self, post_id: str, user_id: str) -> Like:
        return await self.feed_gateway.like_post(post_id, user_id)

    async def unlike_post(self, post_id: str, user_id: str) -> None:
        await self.feed_gateway.unlike_post(post_id, user_id)
