"""Domain model for claims submitted for fact checking."""

from typing import Optional

from pydantic import AnyHttpUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator

from ..errors import InputValidationError

MIN_CLAIM_LENGTH = 10
MAX_CLAIM_LENGTH = 5000

_HTTP_URL = TypeAdapter(AnyHttpUrl)


class Claim(BaseModel):
    """A news snippet to be verified, optionally with an uploaded image."""

    text: str = Field(
        ...,
        min_length=MIN_CLAIM_LENGTH,
        max_length=MAX_CLAIM_LENGTH,
        description="The news text to fact-check",
    )
    image_url: Optional[str] = Field(None, description="URL of an uploaded image")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "text": "ঢাকায় আজ থেকে সব স্কুল এক সপ্তাহের জন্য বন্ধ ঘোষণা করা হয়েছে।",
                "image_url": "https://i.ibb.co/abc123/news.jpg",
            }
        },
    }

    @field_validator("image_url")
    @classmethod
    def _check_image_url(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        _HTTP_URL.validate_python(value)
        return value

    @classmethod
    def create(cls, text: str, image_url: Optional[str] = None) -> "Claim":
        """Build a claim, translating schema errors into InputValidationError."""
        try:
            return cls(text=text, image_url=image_url)
        except ValidationError as e:
            raise InputValidationError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        field = item["loc"][0] if item["loc"] else "input"
        if field == "text" and item["type"] == "string_too_short":
            messages.append(f"Text must be at least {MIN_CLAIM_LENGTH} characters")
        elif field == "text" and item["type"] == "string_too_long":
            messages.append(f"Text must be less than {MAX_CLAIM_LENGTH} characters")
        elif field == "image_url":
            messages.append("Image URL must be a valid http(s) URL")
        else:
            messages.append(f"{field}: {item['msg']}")
    return "Validation failed: " + ", ".join(messages)
