"""Domain models for web search results used as grounding context."""

from typing import List, Optional

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """One organic search hit."""

    title: str = Field(default="", description="Result title")
    link: str = Field(default="", description="Result URL")
    snippet: str = Field(default="", description="Text snippet shown by the provider")
    date: Optional[str] = Field(None, description="Publication date if reported")
    source: Optional[str] = Field(None, description="Publisher name if reported")

    model_config = {"extra": "ignore"}


class AnswerBox(BaseModel):
    """Direct answer block a search provider may return for a query."""

    answer: Optional[str] = None
    title: Optional[str] = None
    link: Optional[str] = None

    model_config = {"extra": "ignore"}


class SearchContext(BaseModel):
    """Results of a single search query."""

    results: List[SearchResult] = Field(default_factory=list)
    answer_box: Optional[AnswerBox] = None
    search_time: str = Field(default="0", description="Provider reported search time")
    total_results: str = Field(default="0", description="Provider reported result count")

    @classmethod
    def empty(cls) -> "SearchContext":
        """Context standing in for a query that produced nothing."""
        return cls()

    @property
    def links(self) -> List[str]:
        """Non-empty result links in provider order."""
        return [result.link for result in self.results if result.link]
