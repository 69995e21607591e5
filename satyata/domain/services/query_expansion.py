"""Expansion of a claim into boosted web-search queries."""

from typing import List

# Suffixes appended to the claim: original, government sources, news, authenticity.
QUERY_SUFFIXES = ("", "সরকারি", "সংবাদ", "সত্যতা")

TRUSTED_NEWS_SITES = (
    "site:prothomalo.com",
    "site:thedailystar.net",
    "site:bbc.com/bengali",
    "site:bdnews24.com",
    "site:jugantor.com",
    "site:ittefaq.com.bd",
    "site:samakal.com",
    "site:banglanews24.com",
)

# Most recent first.
RECENCY_KEYWORDS = ("সাম্প্রতিক", "আজ", "গত সপ্তাহ", "২০২৪", "২০২৩")

BOOSTED_SITE_COUNT = 3


def expand_claim(claim_text: str) -> List[str]:
    """Derive the fixed set of query variants for a claim.

    Args:
        claim_text: Validated claim text

    Returns:
        Four queries: original, government, news and fact-check focused
    """
    return [f"{claim_text} {suffix}" if suffix else claim_text for suffix in QUERY_SUFFIXES]


def boost_query(query: str) -> str:
    """Restrict a query to trusted Bengali outlets and recent coverage."""
    site_filter = " OR ".join(TRUSTED_NEWS_SITES[:BOOSTED_SITE_COUNT])
    recency = RECENCY_KEYWORDS[0]
    return f'({site_filter}) ({recency}) "{query}"'


def build_search_queries(claim_text: str) -> List[str]:
    """Expand a claim and boost every variant."""
    return [boost_query(query) for query in expand_claim(claim_text)]
