# cosmic_social/interactors/follow_interactor.py
import logging
from collections import Counter

from cosmic_social.domain.entities import FollowStats, UserProfile, UserSuggestion
from cosmic_social.domain.enums import FollowAction, FollowTarget
from cosmic_social.domain.events import UserFollowed
from cosmic_social.domain.factories import create_follow_relationship
from cosmic_social.domain.relevance import build_user_suggestions
from cosmic_social.domain.updaters import update_follow_stats
from cosmic_social.domain.validators import validate_follow_action
from cosmic_social.gateways.interfaces import IFollowGateway
from cosmic_social.infrastructure.event_dispatcher import EventDispatcher


class FollowInteractor:
    def __init__(
        self,
        follow_gateway: IFollowGateway,
        event_dispatcher: EventDispatcher,
        logger: logging.Logger | None = None,
    ):
        self.follow_gateway = follow_gateway
        self.event_dispatcher = event_dispatcher
        self.logger = logger or logging.getLogger("FollowInteractor")

    async def follow(self, follower_id: str, following_id: str) -> FollowStats | None:
        """Follow a user and return the follower's stats as they now stand.

        Following twice is a no-op: the existing relationship is checked first
        so the counter only moves once.
        """
        if not validate_follow_action(follower_id, following_id):
            self.logger.warning(f"Rejected follow {follower_id} -> {following_id}")
            return None

        stats = await self.follow_gateway.get_follow_stats(follower_id)
        if await self.follow_gateway.is_following(follower_id, following_id):
            return stats

        follow = await self.follow_gateway.follow_user(
            create_follow_relationship(follower_id, following_id)
        )
        await self.event_dispatcher.dispatch(
            UserFollowed(
                follower_id=follower_id, following_id=following_id, follow_id=follow.id
            )
        )
        return update_follow_stats(stats, FollowAction.FOLLOW, FollowTarget.FOLLOWING)

    async def unfollow(self, follower_id: str, following_id: str) -> FollowStats | None:
        if not validate_follow_action(follower_id, following_id):
            self.logger.warning(f"Rejected unfollow {follower_id} -> {following_id}")
            return None

        stats = await self.follow_gateway.get_follow_stats(follower_id)
        if not await self.follow_gateway.is_following(follower_id, following_id):
            return stats

        await self.follow_gateway.unfollow_user(follower_id, following_id)
        return update_follow_stats(
            stats, FollowAction.UNFOLLOW, FollowTarget.FOLLOWING
        )

    async def get_suggestions(
        self, profile: UserProfile, limit: int = 10, page_size: int = 20
    ) -> list[UserSuggestion]:
        """Rank friends-of-friends the user does not follow yet."""
        following = await self.follow_gateway.get_following(
            profile.user_id, limit=page_size
        )
        followed_ids = {p.user_id for p in following}

        candidates: dict[str, UserProfile] = {}
        mutual_counts: Counter[str] = Counter()
        for friend in following:
            for candidate in await self.follow_gateway.get_following(
                friend.user_id, limit=page_size
            ):
                if (
                    candidate.user_id == profile.user_id
                    or candidate.user_id in followed_ids
                ):
                    continue
                candidates.setdefault(candidate.user_id, candidate)
                mutual_counts[candidate.user_id] += 1

        return build_user_suggestions(
            profile, candidates.values(), mutual_counts, limit
        )
