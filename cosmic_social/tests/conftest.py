# cosmic_social/tests/conftest.py
from datetime import UTC, datetime, timedelta

import httpx
import pytest

from cosmic_social.domain.entities import (
    AstrologicalSummary,
    AyurvedicType,
    FeedItem,
    UserProfile,
)
from cosmic_social.infrastructure.api_client import ApiClient

BASE_URL = "http://social.test"


@pytest.fixture
def now():
    return datetime(2024, 3, 20, 12, 0, tzinfo=UTC)


@pytest.fixture
def make_feed_item(now):
    """Build feed items relative to the fixed ``now``."""

    def _make(item_id, likes=0, comments=0, minutes_ago=0, content_type="text"):
        return FeedItem(
            id=item_id,
            author_id="author",
            content_type=content_type,
            content=f"post {item_id}",
            like_count=likes,
            comment_count=comments,
            created_at=now - timedelta(minutes=minutes_ago),
        )

    return _make


@pytest.fixture
def make_profile():
    def _make(user_id, interests=(), sun_sign="", primary_dosha="", display_name=None):
        return UserProfile(
            user_id=user_id,
            display_name=display_name or f"seeker {user_id}",
            interests=tuple(interests),
            astrological_summary=AstrologicalSummary(sun_sign=sun_sign),
            ayurvedic_type=AyurvedicType(primary_dosha=primary_dosha),
        )

    return _make


class RecordingTransport:
    """Serves canned JSON per (method, path) and keeps every request it saw."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, body=None, status_code=200):
        self.routes[(method, path)] = (status_code, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self.routes.get(
            (request.method, request.url.path), (404, {"detail": "Not found"})
        )
        return httpx.Response(status_code, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
async def api_client(recorder):
    client = ApiClient(BASE_URL, transport=httpx.MockTransport(recorder.handler))
    yield client
    await client.close()
