"""Tests for claim expansion into search queries."""

from satyata.domain.services.query_expansion import (
    boost_query,
    build_search_queries,
    expand_claim,
)


def test_expand_claim_yields_four_variants_in_order(bengali_claim):
    """Test original, government, news and authenticity variants."""
    queries = expand_claim(bengali_claim)

    assert queries == [
        bengali_claim,
        f"{bengali_claim} সরকারি",
        f"{bengali_claim} সংবাদ",
        f"{bengali_claim} সত্যতা",
    ]


def test_boost_query_adds_top_sites_and_recency():
    """Test the boosted query shape."""
    boosted = boost_query("বন্যা পরিস্থিতি")

    assert boosted == (
        "(site:prothomalo.com OR site:thedailystar.net OR site:bbc.com/bengali) "
        '(সাম্প্রতিক) "বন্যা পরিস্থিতি"'
    )
    assert "site:bdnews24.com" not in boosted


def test_boost_is_identical_for_every_variant(bengali_claim):
    """Test that boosting only depends on the wrapped text."""
    for query, boosted in zip(expand_claim(bengali_claim), build_search_queries(bengali_claim)):
        assert boosted.endswith(f'"{query}"')
        assert boosted.replace(f'"{query}"', "") == boost_query("").replace('""', "")


def test_build_search_queries_is_deterministic(bengali_claim):
    """Test that the same claim always yields the same queries."""
    first = build_search_queries(bengali_claim)
    second = build_search_queries(bengali_claim)

    assert first == second
    assert len(first) == 4
