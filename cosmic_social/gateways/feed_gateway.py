# cosmic_social/gateways/feed_gateway.py
from cosmic_social.domain.entities import Comment, FeedFilter, FeedItem, Like, Post
from cosmic_social.gateways.interfaces import IFeedGateway
from cosmic_social.infrastructure.api_client import ApiClient, to_payload


class FeedGateway(IFeedGateway):
    def __init__(self, api_client: ApiClient, prefix: str = "/api/feed"):
        self.api_client = api_client
        self.prefix = prefix

    async def get_feed(
        self, user_id: str, feed_filter: FeedFilter, page: int = 1, limit: int = 20
    ) -> list[FeedItem]:
        params = {**to_payload(feed_filter), "page": page, "limit": limit}
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/{user_id}", params=params
        )
        return [FeedItem.model_validate(item) for item in data]

    async def get_discover_feed(
        self, user_id: str, page: int = 1, limit: int = 20
    ) -> list[FeedItem]:
        data = await self.api_client.request_data(
            "GET",
            f"{self.prefix}/{user_id}/discover",
            params={"page": page, "limit": limit},
        )
        return [FeedItem.model_validate(item) for item in data]

    async def create_post(self, post: Post) -> Post:
        data = await self.api_client.request_data(
            "POST", f"{self.prefix}/post", json=to_payload(post)
        )
        return Post.model_validate(data)

    async def like_post(self, post_id: str, user_id: str) -> Like:
        data = await self.api_client.request_data(
            "POST", f"{self.prefix}/post/{post_id}/like", json={"userId": user_id}
        )
        return Like.model_validate(data)

    async def unlike_post(self, post_id: str, user_id: str) -> None:
        await self.api_client.request_data(
            "DELETE", f"{self.prefix}/post/{post_id}/like/{user_id}"
        )

    async def comment_on_post(self, comment: Comment) -> Comment:
        data = await self.api_client.request_data(
            "POST",
            f"{self.prefix}/post/{comment.post_id}/comment",
            json=to_payload(comment),
        )
        return Comment.model_validate(data)

    async def get_comments(
        self, post_id: str, page: int = 1, limit: int = 10
    ) -> list[Comment]:
        data = await self.api_client.request_data(
            "GET",
            f"{self.prefix}/post/{post_id}/comments",
            params={"page": page, "limit": limit},
        )
        return [Comment.model_validate(comment) for comment in data]

    async def share_post(self, post_id: str, user_id: str) -> None:
        await self.api_client.request_data(
            "POST", f"{self.prefix}/post/{post_id}/share", json={"userId": user_id}
        )

    async def delete_post(self, post_id: str, author_id: str) -> None:
        await self.api_client.request_data(
            "DELETE", f"{self.prefix}/post/{post_id}", json={"authorId": author_id}
        )

    async def report_post(self, post_id: str, reporter_id: str, reason: str) -> None:
        await self.api_client.request_data(
            "POST",
            f"{self.prefix}/post/{post_id}/report",
            json={"reporterId": reporter_id, "reason": reason},
        )
