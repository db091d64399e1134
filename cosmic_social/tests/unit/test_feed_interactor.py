# cosmic_social/tests/unit/test_feed_interactor.py
from unittest.mock import Mock

import pytest

from cosmic_social.domain.entities import FeedFilter
from cosmic_social.domain.events import PostCommented, UserMentioned
from cosmic_social.gateways.interfaces import IFeedGateway
from cosmic_social.infrastructure.event_dispatcher import EventDispatcher
from cosmic_social.interactors.feed_interactor import FeedInteractor


@pytest.fixture
def mock_feed_gateway():
    gateway = Mock(spec=IFeedGateway)
    gateway.create_post.side_effect = lambda post: post
    gateway.comment_on_post.side_effect = lambda comment: comment
    return gateway


@pytest.fixture
def mock_event_dispatcher():
    return Mock(spec=EventDispatcher)


@pytest.fixture
def feed_interactor(mock_feed_gateway, mock_event_dispatcher):
    return FeedInteractor(mock_feed_gateway, mock_event_dispatcher)


class TestFeedInteractor:
    @pytest.mark.asyncio
    async def test_get_feed_ranks_remote_items(
        self, feed_interactor, mock_feed_gateway, make_feed_item, now
    ):
        mock_feed_gateway.get_feed.return_value = [
            make_feed_item("quiet", likes=1),
            make_feed_item("busy", likes=9, comments=4),
            make_feed_item("video", likes=50, content_type="video"),
        ]
        feed_filter = FeedFilter(sort_by="popular", content_types=("text",))

        result = await feed_interactor.get_feed("u1", feed_filter, now=now)

        assert [item.id for item in result] == ["busy", "quiet"]
        mock_feed_gateway.get_feed.assert_called_once_with("u1", feed_filter, 1, 20)

    @pytest.mark.asyncio
    async def test_create_post_rejects_empty_text(self, feed_interactor, mock_feed_gateway):
        result = await feed_interactor.create_post("u1", "   ")

        assert result is None
        mock_feed_gateway.create_post.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_post_dispatches_mentions(
        self, feed_interactor, mock_feed_gateway, mock_event_dispatcher
    ):
        post = await feed_interactor.create_post(
            "u1", "Circle with @u2 and @u3", mentioned_ids=["u2", "u3", "u2"]
        )

        assert post.author_id == "u1"
        mock_feed_gateway.create_post.assert_called_once()
        events = [c.args[0] for c in mock_event_dispatcher.dispatch.call_args_list]
        assert events == [
            UserMentioned(mentioned_id="u2", actor_id="u1", post_id=post.id),
            UserMentioned(mentioned_id="u3", actor_id="u1", post_id=post.id),
        ]

    @pytest.mark.asyncio
    async def test_comment_on_post(
        self, feed_interactor, mock_event_dispatcher, make_feed_item
    ):
        post = make_feed_item("p1")

        comment = await feed_interactor.comment_on_post(post, "u2", "So grounding")

        assert comment.post_id == "p1"
        mock_event_dispatcher.dispatch.assert_called_once_with(
            PostCommented(
                post_id="p1", comment_id=comment.id, author_id="u2", post_author_id="author"
            )
        )

    @pytest.mark.asyncio
    async def test_comment_too_long(
        self, feed_interactor, mock_feed_gateway, mock_event_dispatcher, make_feed_item
    ):
        result = await feed_interactor.comment_on_post(make_feed_item("p1"), "u2", "x" * 2001)

        assert result is None
        mock_feed_gateway.comment_on_post.assert_not_called()
        mock_event_dispatcher.dispatch.assert_not_called()
