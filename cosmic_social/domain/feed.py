# cosmic_social/domain/feed.py
"""Feed filtering and ranking.

``apply_filter`` narrows a timeline by content type and orders it by one of the
``SortBy`` strategies. Ordering uses ``sorted``, which is stable: items that
compare equal keep the order they arrived in.
"""
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import assert_never

from cosmic_social.domain.entities import FeedFilter, FeedItem, utc_now
from cosmic_social.domain.enums import SortBy

RELEVANT_ENGAGEMENT_WEIGHT = 0.7
RELEVANT_AGE_WEIGHT = 0.3


def as_utc(moment: datetime) -> datetime:
    # naive wire timestamps are UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def age_millis(item: FeedItem, now: datetime) -> float:
    return (as_utc(now) - as_utc(item.created_at)).total_seconds() * 1000


def relevance(item: FeedItem, now: datetime) -> float:
    # The age term is added, not subtracted: at equal engagement an older
    # post outranks a newer one. Kept until product confirms the intent.
    return (
        RELEVANT_ENGAGEMENT_WEIGHT * item.engagement
        + RELEVANT_AGE_WEIGHT * age_millis(item, now)
    )


def _sort_key(sort_by: SortBy, now: datetime) -> Callable[[FeedItem], float]:
    if sort_by is SortBy.RECENT:
        return lambda item: as_utc(item.created_at).timestamp()
    if sort_by is SortBy.POPULAR:
        return lambda item: item.engagement
    if sort_by is SortBy.RELEVANT:
        return lambda item: relevance(item, now)
    assert_never(sort_by)


def apply_filter(
    items: Iterable[FeedItem], feed_filter: FeedFilter, now: datetime | None = None
) -> list[FeedItem]:
    filtered = list(items)

    if feed_filter.content_types:
        allowed = set(feed_filter.content_types)
        filtered = [item for item in filtered if item.content_type in allowed]

    key = _sort_key(SortBy(feed_filter.sort_by), now or utc_now())
    return sorted(filtered, key=key, reverse=True)
