# cosmic_social/gateways/profile_gateway.py
from collections.abc import Mapping
from typing import Any

from cosmic_social.domain.entities import Badge, UserProfile, UserSuggestion
from cosmic_social.gateways.interfaces import IProfileGateway
from cosmic_social.infrastructure.api_client import ApiClient, to_payload


class ProfileGateway(IProfileGateway):
    def __init__(self, api_client: ApiClient, prefix: str = "/api/profile"):
        self.api_client = api_client
        self.prefix = prefix

    async def get_profile(self, user_id: str) -> UserProfile:
        data = await self.api_client.request_data("GET", f"{self.prefix}/{user_id}")
        return UserProfile.model_validate(data)

    async def update_profile(self, profile: UserProfile) -> UserProfile:
        data = await self.api_client.request_data(
            "PUT", f"{self.prefix}/{profile.user_id}", json=to_payload(profile)
        )
        return UserProfile.model_validate(data)

    async def generate_cosmic_avatar(
        self, user_id: str, birth_chart: Mapping[str, Any]
    ) -> str:
        data = await self.api_client.request_data(
            "POST",
            f"{self.prefix}/{user_id}/avatar",
            json={"birthChart": dict(birth_chart)},
        )
        return data["avatarUrl"]

    async def add_badge(self, user_id: str, badge_id: str) -> Badge:
        data = await self.api_client.request_data(
            "POST", f"{self.prefix}/{user_id}/badges", json={"badgeId": badge_id}
        )
        return Badge.model_validate(data)

    async def get_user_suggestions(
        self, user_id: str, limit: int = 10
    ) -> list[UserSuggestion]:
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/{user_id}/suggestions", params={"limit": limit}
        )
        return [UserSuggestion.model_validate(s) for s in data]

    async def search_profiles(
        self, query: str, filters: Mapping[str, Any] | None = None
    ) -> list[UserProfile]:
        params = {"query": query, **(filters or {})}
        data = await self.api_client.request_data(
            "GET", f"{self.prefix}/search", params=params
        )
        return [UserProfile.model_validate(p) for p in data]
