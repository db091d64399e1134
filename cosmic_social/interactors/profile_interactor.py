# cosmic_social/interactors/profile_interactor.py
import logging
from collections.abc import Mapping
from typing import Any

from cosmic_social.domain.entities import Badge, ProfileUpdate, UserProfile
from cosmic_social.domain.updaters import (
    add_badge,
    add_interest,
    remove_interest,
    update_profile,
)
from cosmic_social.domain.validators import validate_profile
from cosmic_social.gateways.interfaces import IProfileGateway


class ProfileInteractor:
    def __init__(
        self, profile_gateway: IProfileGateway, logger: logging.Logger | None = None
    ):
        self.profile_gateway = profile_gateway
        self.logger = logger or logging.getLogger("ProfileInteractor")

    async def get_profile(self, user_id: str) -> UserProfile:
        return await self.profile_gateway.get_profile(user_id)

    async def _save(self, current: UserProfile, updated: UserProfile) -> UserProfile:
        if updated is current:
            return current
        return await self.profile_gateway.update_profile(updated)

    async def update_profile(
        self, user_id: str, updates: ProfileUpdate | Mapping[str, Any]
    ) -> UserProfile | None:
        current = await self.profile_gateway.get_profile(user_id)
        updated = update_profile(current, updates)
        if not validate_profile(updated):
            self.logger.warning(f"Rejected profile update for {user_id}")
            return None
        return await self._save(current, updated)

    async def add_interest(self, user_id: str, interest: str) -> UserProfile:
        current = await self.profile_gateway.get_profile(user_id)
        return await self._save(current, add_interest(current, interest))

    async def remove_interest(self, user_id: str, interest: str) -> UserProfile:
        current = await self.profile_gateway.get_profile(user_id)
        if interest not in current.interests:
            return current
        return await self._save(current, remove_interest(current, interest))

    async def award_badge(self, user_id: str, badge_id: str) -> UserProfile:
        badge: Badge = await self.profile_gateway.add_badge(user_id, badge_id)
        current = await self.profile_gateway.get_profile(user_id)
        return add_badge(current, badge)
