"""Domain model for fact checking results."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from ..errors import MalformedModelResponseError

logger = logging.getLogger(__name__)


class Decision(str, Enum):
    """Possible verdicts for a claim."""

    TRUE = "true"
    FALSE = "false"
    PARTIALLY_TRUE = "partially_true"


class FactCheckResult(BaseModel):
    """Verdict returned to the caller.

    Field names follow Python conventions; the wire format uses
    ``investigationSuggestions`` which is accepted on input and emitted by
    ``model_dump(by_alias=True)``.

    Values are not coerced: a confidence given as a string or boolean, or
    text given as a number, is rejected.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    decision: Decision = Field(..., description="Verdict on the claim")
    confidence: int = Field(..., ge=0, le=100, description="Confidence score (0-100)")
    summary: StrictStr = Field(..., description="Analysis summary in Bengali")
    investigation_suggestions: List[StrictStr] = Field(
        ...,
        alias="investigationSuggestions",
        description="Follow-up checks the reader can perform",
    )
    sources: List[StrictStr] = Field(default_factory=list, description="Supporting URLs")

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence_is_number(cls, value):
        # Whole-number floats such as 90.0 still pass the int field check.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("confidence must be a JSON number")
        return value

    def with_sources(self, sources: List[str]) -> "FactCheckResult":
        """Return a copy carrying the given source list."""
        return self.model_copy(update={"sources": sources})

    def to_dict(self) -> dict:
        """Convert to the JSON shape used by the HTTP API."""
        return self.model_dump(mode="json", by_alias=True)


FALLBACK_SUMMARY = (
    "বিশ্লেষণ সম্পন্ন হয়েছে, কিন্তু প্রতিক্রিয়ার ফরম্যাট অপ্রত্যাশিত ছিল। "
    "অনুগ্রহ করে অতিরিক্ত সূত্রের মাধ্যমে তথ্য যাচাই করুন।"
)

FALLBACK_SUGGESTIONS = (
    "তথ্যের উৎস যাচাই করুন",
    "এই বিষয়ে সাম্প্রতিক আপডেট দেখুন",
    "বহু নির্ভরযোগ্য সূত্রের সাথে তুলনা করুন",
)


def fallback_result() -> FactCheckResult:
    """The fixed result used when the model answer cannot be trusted."""
    return FactCheckResult(
        decision=Decision.PARTIALLY_TRUE,
        confidence=50,
        summary=FALLBACK_SUMMARY,
        investigation_suggestions=list(FALLBACK_SUGGESTIONS),
        sources=[],
    )


@dataclass(frozen=True)
class VerdictParseOutcome:
    """Tagged outcome of decoding a raw model answer.

    Either ``result`` is a validated model answer (``is_fallback`` False) or
    it is the fixed fallback and ``error`` says why the answer was rejected.
    """

    result: FactCheckResult
    is_fallback: bool
    error: Optional[str] = None


def decode_model_response(raw: Optional[str]) -> FactCheckResult:
    """Decode and validate a raw model answer.

    Raises:
        MalformedModelResponseError: If the answer is empty, not JSON, or
            does not match the result schema
    """
    if not raw or not raw.strip():
        raise MalformedModelResponseError("Empty response from model")
    try:
        return FactCheckResult.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedModelResponseError(str(e)) from e


def parse_model_response(raw: Optional[str]) -> VerdictParseOutcome:
    """Decode a raw model answer, replacing anything malformed with the fallback."""
    try:
        return VerdictParseOutcome(result=decode_model_response(raw), is_fallback=False)
    except MalformedModelResponseError as e:
        preview = (raw or "")[:500]
        logger.warning(f"⚠️ Malformed model response, using fallback: {e}")
        logger.debug(f"Original content: {preview}")
        return VerdictParseOutcome(result=fallback_result(), is_fallback=True, error=str(e))


def merge_sources(*groups: Iterable[str]) -> List[str]:
    """Concatenate source lists in order, dropping empties and duplicates."""
    merged: List[str] = []
    seen = set()
    for group in groups:
        for source in group:
            if source and source not in seen:
                seen.add(source)
                merged.append(source)
    return merged
