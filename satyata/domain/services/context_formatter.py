"""Formatting of search results into grounding context for the model."""

from typing import List, Sequence

from ..models.search import SearchContext

CONTEXT_HEADER = "=== SEARCH RESULTS FOR FACT-CHECKING ===\n\n"
SECTION_SEPARATOR = "---\n\n"
TRUNCATION_NOTICE = "\n[... search context truncated ...]\n"
DEFAULT_MAX_CONTEXT_CHARS = 8000


def format_search_context(index: int, context: SearchContext) -> str:
    """Render one query's results as a labeled section.

    Args:
        index: 1-based position of the query
        context: Results of that query

    Returns:
        The section text, or an empty string when there are no results
    """
    if not context.results:
        return ""

    lines: List[str] = [
        f"Search {index} Results:\n",
        f"Total Results: {context.total_results}\n",
        f"Search Time: {context.search_time}ms\n\n",
    ]
    for number, result in enumerate(context.results, 1):
        lines.append(f"{number}. {result.title}\n")
        lines.append(f"   Source: {result.link}\n")
        lines.append(f"   Snippet: {result.snippet}\n")
        if result.date:
            lines.append(f"   Date: {result.date}\n")
        lines.append("\n")

    if context.answer_box:
        lines.append(f"Quick Answer: {context.answer_box.answer or ''}\n")
        lines.append(f"Source: {context.answer_box.link or ''}\n\n")

    lines.append(SECTION_SEPARATOR)
    return "".join(lines)


def format_search_contexts(
    contexts: Sequence[SearchContext],
    max_chars: int = DEFAULT_MAX_CONTEXT_CHARS,
) -> str:
    """Merge per-query results into one bounded text block.

    Sections keep the input order; queries without results are skipped.
    When the block exceeds ``max_chars`` it is cut and a notice appended.
    """
    text = CONTEXT_HEADER + "".join(
        format_search_context(index, context) for index, context in enumerate(contexts, 1)
    )
    if len(text) <= max_chars:
        return text
    keep = max(len(CONTEXT_HEADER), max_chars - len(TRUNCATION_NOTICE))
    return text[:keep] + TRUNCATION_NOTICE
