# cosmic_social/tests/unit/test_relevance.py
from cosmic_social.domain.relevance import (
    build_user_suggestions,
    calculate_relevance_score,
    shared_interests,
)


def test_score_combines_interests_sign_and_dosha(make_profile):
    me = make_profile("u1", ["yoga", "reiki", "tarot"], "Leo", "pitta")
    them = make_profile("u2", ["reiki", "yoga", "crystals"], "Leo", "pitta")
    assert calculate_relevance_score(me, them) == 10 * 2 + 5 + 3


def test_score_without_overlap(make_profile):
    me = make_profile("u1", ["yoga"], "Leo", "pitta")
    them = make_profile("u2", ["tarot"], "Virgo", "kapha")
    assert calculate_relevance_score(me, them) == 0


def test_score_counts_from_first_profile(make_profile):
    me = make_profile("u1", ["yoga", "yoga"], "Leo", "vata")
    them = make_profile("u2", ["yoga"], "Aries", "kapha")
    assert shared_interests(me, them) == ("yoga", "yoga")
    assert calculate_relevance_score(me, them) == 20
    assert calculate_relevance_score(them, me) == 10


def test_suggestions_are_ranked_and_limited(make_profile):
    me = make_profile("me", ["yoga", "reiki"], "Leo", "pitta")
    candidates = [
        make_profile("low", ["tarot"], "Virgo", "kapha"),
        make_profile("high", ["yoga", "reiki"], "Leo", "vata"),
        make_profile("me", ["yoga", "reiki"], "Leo", "pitta"),
        make_profile("mid", ["yoga"], "Aries", "kapha"),
    ]

    suggestions = build_user_suggestions(me, candidates, limit=2)

    assert [s.user_id for s in suggestions] == ["high", "mid"]
    assert suggestions[0].relevance_score == 25
    assert suggestions[0].shared_interests == ("yoga", "reiki")


def test_mutual_connections_break_ties(make_profile):
    me = make_profile("me", ["yoga"], "Leo", "pitta")
    candidates = [
        make_profile("a", ["yoga"], "Virgo", "kapha"),
        make_profile("b", ["yoga"], "Virgo", "kapha"),
    ]
    suggestions = build_user_suggestions(me, candidates, {"b": 3, "a": 1})
    assert [(s.user_id, s.mutual_connections) for s in suggestions] == [("b", 3), ("a", 1)]
