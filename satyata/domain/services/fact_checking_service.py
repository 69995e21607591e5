"""Service coordinating web search and AI verification of a claim."""

import asyncio
import logging
from typing import List, Sequence

from ..errors import ConfigurationError
from ..models.claim import Claim
from ..models.fact_check_result import FactCheckResult, merge_sources, parse_model_response
from ..models.search import SearchContext
from ..ports.ai_provider import AIProvider
from ..ports.search_provider import SearchProvider
from .context_formatter import DEFAULT_MAX_CONTEXT_CHARS, format_search_contexts
from .prompts import SYSTEM_PROMPT, build_user_prompt
from .query_expansion import build_search_queries

logger = logging.getLogger(__name__)

DEFAULT_RESULTS_PER_QUERY = 3


async def gather_search_contexts(
    search_provider: SearchProvider,
    queries: Sequence[str],
    num_results: int = DEFAULT_RESULTS_PER_QUERY,
) -> List[SearchContext]:
    """Run all queries concurrently and return one context per query.

    A query that fails is logged and contributes an empty context, so the
    result always lines up with ``queries``. Configuration errors are not
    absorbed.
    """
    outcomes = await asyncio.gather(
        *(search_provider.search(query, num_results) for query in queries),
        return_exceptions=True,
    )

    contexts: List[SearchContext] = []
    failures = 0
    for i, outcome in enumerate(outcomes):
        if isinstance(outcome, ConfigurationError):
            raise outcome
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            failures += 1
            logger.warning(f"⚠️ Search query {i + 1}/{len(queries)} failed: {outcome}")
            contexts.append(SearchContext.empty())
        else:
            contexts.append(outcome)

    if queries and failures == len(queries):
        logger.warning("⚠️ All search queries failed - continuing without search context")
    return contexts


class FactCheckingService:
    """Service for coordinating fact checking."""

    def __init__(
        self,
        ai_provider: AIProvider,
        search_provider: SearchProvider,
        results_per_query: int = DEFAULT_RESULTS_PER_QUERY,
        max_context_chars: int = DEFAULT_MAX_CONTEXT_CHARS,
    ):
        """Initialize the service.

        Args:
            ai_provider: LLM used to produce the verdict
            search_provider: Web search used to ground the verdict
            results_per_query: Organic results requested per search query
            max_context_chars: Upper bound on the search context sent to the model
        """
        self.ai = ai_provider
        self.search = search_provider
        self.results_per_query = results_per_query
        self.max_context_chars = max_context_chars
        logger.info("🔧 FactCheckingService initialized")

    async def fact_check(self, claim: Claim) -> FactCheckResult:
        """Fact check a claim.

        Args:
            claim: Validated claim

        Returns:
            The validated model verdict with merged sources, or the fixed
            fallback when the model answer is malformed

        Raises:
            ProviderUnavailableError: If the AI provider cannot be reached
            ConfigurationError: If a provider is not configured
        """
        logger.info(f"🔍 Starting fact check for claim: {claim.text[:100]}...")

        queries = build_search_queries(claim.text)
        contexts = await gather_search_contexts(self.search, queries, self.results_per_query)
        search_context = format_search_contexts(contexts, self.max_context_chars)
        result_count = sum(len(context.results) for context in contexts)
        logger.info(f"📚 Gathered {result_count} search results from {len(queries)} queries")

        user_prompt = build_user_prompt(claim.text, search_context, claim.image_url)
        raw = await self.ai.complete_json(SYSTEM_PROMPT, user_prompt)

        outcome = parse_model_response(raw)
        if outcome.is_fallback:
            return outcome.result

        search_links = [link for context in contexts for link in context.links]
        result = outcome.result.with_sources(merge_sources(outcome.result.sources, search_links))
        logger.info(
            f"✅ Fact check complete: {result.decision.value} "
            f"({result.confidence}%), {len(result.sources)} sources"
        )
        return result
