"""User-facing notices shown at the top of a page (the page's alert box)."""

from typing import Callable

from pydantic import BaseModel

# Asked before destructive actions; returns True when the user agreed
Confirm = Callable[[str], bool]


class Notice(BaseModel):
    level: str  # "success" or "error"
    text: str

    model_config = {"frozen": True}

    @classmethod
    def success(cls, text: str) -> "Notice":
        return cls(level="success", text=text)

    @classmethod
    def error(cls, text: str) -> "Notice":
        return cls(level="error", text=text)
