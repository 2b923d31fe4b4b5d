"""
Book Review Models - Pydantic models for book review API data structures
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class Book(BaseModel):
    """A book as returned by the book review API. Unknown fields are kept as-is."""

    model_config = ConfigDict(extra="allow")

    # Values are whatever the API returns (e.g. a numeric title such as 1984)
    title: Any = None
    author: Any = None
    isbn: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Book":
        """Lenient conversion used for display; non-dict payloads yield an empty Book."""
        if isinstance(payload, dict):
            return cls.model_validate(payload)
        return cls()

    def label(self) -> str:
        title = "(untitled)" if self.title in (None, "") else str(self.title)
        return f"{title} by {self.author}" if self.author else title


class CallResult(BaseModel):
    """Outcome of a single API call: either a payload or an error message."""

    url: str
    ok: bool
    data: Any = None
    error: str | None = None

    @model_validator(mode="after")
    def check_outcome(self) -> "CallResult":
        if self.ok and self.error is not None:
            raise ValueError("successful CallResult cannot carry an error")
        if not self.ok and not self.error:
            raise ValueError("failed CallResult requires an error message")
        return self

    @classmethod
    def success(cls, url: str, data: Any) -> "CallResult":
        return cls(url=url, ok=True, data=data)

    @classmethod
    def failure(cls, url: str, error: str) -> "CallResult":
        return cls(url=url, ok=False, error=error)
