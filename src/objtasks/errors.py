"""Error hierarchy for objtasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selector.model import Category


class ObjtasksError(Exception):
    """Base error for all objtasks errors."""


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(ObjtasksError):
    """Base error for invalid selector construction."""


class DuplicateCategoryError(SelectorError):
    """A single-occurrence part (element, id, pseudo-element) was set twice."""

    def __init__(self, category: Category) -> None:
        self.category = category
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            f"inside the selector (got a second {category.label})"
        )


class OutOfOrderError(SelectorError):
    """A selector part was added after a part of higher rank."""

    def __init__(self, category: Category, watermark: Category) -> None:
        self.category = category
        self.watermark = watermark
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element "
            f"(got {category.label} after {watermark.label})"
        )


class InvalidCombinatorError(SelectorError, ValueError):
    """The combinator passed to combine() is not one of ' ', '+', '~', '>'."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid combinator: {token!r}")


# ---------------------------------------------------------------------------
# Codec errors
# ---------------------------------------------------------------------------


class ParseError(ObjtasksError, ValueError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class EncodeError(ObjtasksError, ValueError):
    """Raised when a value cannot be serialised to JSON text."""
