# cosmic_social/domain/relevance.py
from collections.abc import Iterable, Mapping

from cosmic_social.domain.entities import UserProfile, UserSuggestion

SHARED_INTEREST_POINTS = 10
SAME_SUN_SIGN_POINTS = 5
SAME_PRIMARY_DOSHA_POINTS = 3


def shared_interests(profile: UserProfile, other: UserProfile) -> tuple[str, ...]:
    theirs = set(other.interests)
    return tuple(interest for interest in profile.interests if interest in theirs)


def calculate_relevance_score(profile: UserProfile, other: UserProfile) -> int:
    """Unbounded ranking key for how well ``other`` suits ``profile``.

    Computed from ``profile``'s side, so it is not guaranteed symmetric.
    """
    score = SHARED_INTEREST_POINTS * len(shared_interests(profile, other))
    if (
        profile.astrological_summary.sun_sign
        == other.astrological_summary.sun_sign
    ):
        score += SAME_SUN_SIGN_POINTS
    if profile.ayurvedic_type.primary_dosha == other.ayurvedic_type.primary_dosha:
        score += SAME_PRIMARY_DOSHA_POINTS
    return score


def build_user_suggestions(
    profile: UserProfile,
    candidates: Iterable[UserProfile],
    mutual_counts: Mapping[str, int] | None = None,
    limit: int = 10,
) -> list[UserSuggestion]:
    mutual_counts = mutual_counts or {}
    suggestions = [
        UserSuggestion(
            user_id=candidate.user_id,
            display_name=candidate.display_name,
            cosmic_avatar=candidate.cosmic_avatar,
            mutual_connections=mutual_counts.get(candidate.user_id, 0),
            shared_interests=shared_interests(profile, candidate),
            relevance_score=calculate_relevance_score(profile, candidate),
        )
        for candidate in candidates
        if candidate.user_id != profile.user_id
    ]
    suggestions.sort(
        key=lambda s: (s.relevance_score, s.mutual_connections), reverse=True
    )
    return suggestions[:limit]
