"""Fake providers and builders shared by the tests."""

import json
from typing import Dict, List, Optional

from satyata.domain.models.search import AnswerBox, SearchContext, SearchResult

BENGALI_CLAIM = "ঢাকায় আজ থেকে সব স্কুল এক সপ্তাহের জন্য বন্ধ ঘোষণা করা হয়েছে বলে জানা গেছে"


class FakeSearchProvider:
    """Search provider returning canned contexts and recording queries."""

    def __init__(self, contexts: Optional[Dict[int, object]] = None, default: Optional[SearchContext] = None):
        self._contexts = contexts or {}
        self._default = default or SearchContext.empty()
        self.queries: List[str] = []
        self.num_results: List[int] = []

    async def initialize(self) -> None:
        pass

    async def search(self, query: str, num_results: int = 5) -> SearchContext:
        index = len(self.queries)
        self.queries.append(query)
        self.num_results.append(num_results)
        outcome = self._contexts.get(index, self._default)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def shutdown(self) -> None:
        pass

    @property
    def provider_name(self) -> str:
        return "FakeSearch"

    @property
    def is_available(self) -> bool:
        return True


class FakeAIProvider:
    """AI provider returning a fixed raw answer and recording prompts."""

    def __init__(self, raw: str = "", error: Optional[Exception] = None):
        self.raw = raw
        self.error = error
        self.calls: List[Dict[str, str]] = []

    async def initialize(self) -> None:
        pass

    async def shutdown(self) -> None:
        pass

    async def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append({"system": system_prompt, "user": user_prompt})
        if self.error:
            raise self.error
        return self.raw

    @property
    def provider_name(self) -> str:
        return "FakeAI"

    @property
    def is_available(self) -> bool:
        return True

    @property
    def capabilities(self) -> Dict[str, bool]:
        return {}


def make_context(prefix: str, count: int = 2, answer: bool = False) -> SearchContext:
    """Build a context with ``count`` results whose links start with ``prefix``."""
    return SearchContext(
        results=[
            SearchResult(
                title=f"{prefix} title {i}",
                link=f"https://{prefix}.example.com/{i}",
                snippet=f"{prefix} snippet {i}",
            )
            for i in range(1, count + 1)
        ],
        search_time="0.42",
        total_results="1200",
        answer_box=AnswerBox(
            answer=f"{prefix} answer", title="Answer", link=f"https://{prefix}.example.com/answer"
        ) if answer else None,
    )


def model_answer(**overrides) -> str:
    """Raw JSON as the model would return it."""
    payload = {
        "decision": "false",
        "confidence": 90,
        "summary": "দাবিটি সঠিক নয়।",
        "investigationSuggestions": ["সরকারি বিজ্ঞপ্তি দেখুন", "শিক্ষা মন্ত্রণালয়ের ওয়েবসাইট দেখুন"],
        "sources": ["https://model.example.com/a"],
    }
    payload.update(overrides)
    return json.dumps(payload, ensure_ascii=False)


