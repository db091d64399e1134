# cosmic_social/gateways/follow_gateway.py
from cosmic_social.domain.entities import Follow, FollowStats, UserProfile, UserSuggestion
from cosmic_social.gateways.interfaces import IFollowGateway
from cosmic_social.infrastructure.api_client import ApiClient, to_payload


class FollowGateway(IFollowGateway):
    def __init__(self, api_client: ApiClient, prefix: str = "/api/follow"):
        self.api_client = api_client
        self.prefix = prefix

    async def _profiles(self, endpoint: str, **params) -> list[UserProfile]:
        data = await self.api_client.request_data("GET", endpoint, params=params)
        return [UserProfile.model_validate(profile) for profile in data]

    async def _suggestions(self, endpoint: str, **params) -> list[UserSuggestion]:
        data = await self.api_client.request_data("GET", endpoint, params=params)
        return [UserSuggestion.model_validate(suggestion) for suggestion in data]

    async def follow_user(self, follow: Follow) -> Follow:
        data = await self.api_client.request_data(
            "POST", self.prefix, json=to_payload(follow)
        )
        return Follow.model_validate(data)

    async def unfollow_user(self, follower_id: str, following_id: str) -> None:
        await self.api_client.request_data(
            "DELETE", f"{self.prefix}/{follower_id}/{following_id}"
        )

    async def get_follow_stats(self, user_id: str) -> FollowStats:
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/{user_id}/stats"
        )
        return FollowStats.model_validate(data)

    async def get_followers(
        self, user_id: str, page: int = 1, limit: int = 20
    ) -> list[UserProfile]:
        return await self._profiles(
            f"{self.prefix}/{user_id}/followers", page=page, limit=limit
        )

    async def get_following(
        self, user_id: str, page: int = 1, limit: int = 20
    ) -> list[UserProfile]:
        return await self._profiles(
            f"{self.prefix}/{user_id}/following", page=page, limit=limit
        )

    async def is_following(self, follower_id: str, following_id: str) -> bool:
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/{follower_id}/is-following/{following_id}"
        )
        return bool(data.get("isFollowing", False))

    async def get_mutual_connections(
        self, user_id: str, other_user_id: str
    ) -> list[UserProfile]:
        return await self._profiles(f"{self.prefix}/{user_id}/mutual/{other_user_id}")

    async def get_user_suggestions(
        self, user_id: str, limit: int = 10
    ) -> list[UserSuggestion]:
        return await self._suggestions(
            f"{self.prefix}/{user_id}/suggestions", limit=limit
        )

    async def get_suggestions_based_on_interests(
        self, user_id: str, interests: list[str], limit: int = 10
    ) -> list[UserSuggestion]:
        return await self._suggestions(
            f"{self.prefix}/{user_id}/suggestions/interests",
            interests=",".join(interests),
            limit=limit,
        )

    async def get_suggestions_based_on_mutual_connections(
        self, user_id: str, limit: int = 10
    ) -> list[UserSuggestion]:
        return await self._suggestions(
            f"{self.prefix}/{user_id}/suggestions/mutual", limit=limit
        )
