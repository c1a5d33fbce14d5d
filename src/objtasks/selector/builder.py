"""Fluent builder for CSS selector strings.

Example:
    element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        => 'a[href$=".png"]:focus'

    combine(
        element("div").id("main"),
        ">",
        combine(element("tr"), " ", element("td")),
    ).stringify()
        => 'div#main > tr   td'
"""

from __future__ import annotations

import logging
from dataclasses import replace

from objtasks.errors import (
    DuplicateCategoryError,
    InvalidCombinatorError,
    OutOfOrderError,
)
from objtasks.selector.model import (
    Category,
    Combinator,
    CompositeSelector,
    Renderable,
    Selector,
)

__all__ = [
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates the parts of one selector and renders them to text.

    Parts must be added in rank order (see Category). Element, id and
    pseudo-element may be set once. A failed call leaves the parts added
    before it untouched; the builder should be discarded.
    """

    def __init__(self) -> None:
        self._selector = Selector()
        self._watermark: Category | None = None

    # --- setters --------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        self._check(Category.ELEMENT, value, self._selector.element)
        self._selector.element = value
        return self._touch(Category.ELEMENT)

    def id(self, value: str) -> SelectorBuilder:
        self._check(Category.ID, value, self._selector.id)
        self._selector.id = value
        return self._touch(Category.ID)

    def class_(self, value: str) -> SelectorBuilder:
        self._check(Category.CLASS, value)
        self._selector.classes.append(value)
        return self._touch(Category.CLASS)

    def attr(self, value: str) -> SelectorBuilder:
        self._check(Category.ATTRIBUTE, value)
        self._selector.attributes.append(value)
        return self._touch(Category.ATTRIBUTE)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._check(Category.PSEUDO_CLASS, value)
        self._selector.pseudo_classes.append(value)
        return self._touch(Category.PSEUDO_CLASS)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._check(Category.PSEUDO_ELEMENT, value, self._selector.pseudo_element)
        self._selector.pseudo_element = value
        return self._touch(Category.PSEUDO_ELEMENT)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return self._selector.stringify()

    def snapshot(self) -> Selector:
        """Return a copy of the parts accumulated so far."""
        s = self._selector
        return replace(
            s,
            classes=list(s.classes),
            attributes=list(s.attributes),
            pseudo_classes=list(s.pseudo_classes),
        )

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- internals ------------------------------------------------------------

    def _check(
        self, category: Category, value: str, current: str | None = None
    ) -> None:
        if not isinstance(value, str):
            raise TypeError(
                f"{category.label} must be a string, got {type(value).__name__}"
            )
        if not value:
            raise ValueError(f"{category.label} must not be empty")
        if not category.repeatable and current is not None:
            raise DuplicateCategoryError(category)
        if self._watermark is not None and category < self._watermark:
            raise OutOfOrderError(category, self._watermark)

    def _touch(self, category: Category) -> SelectorBuilder:
        if self._watermark is None or self._watermark < category:
            self._watermark = category
        return self


# ---------------------------------------------------------------------------
# Entry points: each starts a fresh builder
# ---------------------------------------------------------------------------


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    left: Renderable, combinator: str | Combinator, right: Renderable
) -> CompositeSelector:
    """Join two selectors (or composites) with a combinator: ' ', '+', '~' or '>'.

    Neither child is modified; the result is a new immutable node rendered as
    ``"<left> <combinator> <right>"``.
    """
    if isinstance(combinator, Combinator):
        comb = combinator
    else:
        try:
            comb = Combinator(combinator)
        except ValueError as exc:
            raise InvalidCombinatorError(combinator) from exc
    for side, child in (("left", left), ("right", right)):
        if isinstance(child, type) or not isinstance(child, Renderable):
            raise TypeError(
                f"{side} operand must provide stringify(), got {type(child).__name__}"
            )
    logger.debug("Combining selectors with %r", comb.value)
    return CompositeSelector(left=left, combinator=comb, right=right)


class CssSelectorBuilder:
    """Facade grouping the entry points, e.g. ``css_selector_builder.element("a")``."""

    element = staticmethod(element)
    id = staticmethod(id)
    class_ = staticmethod(class_)
    attr = staticmethod(attr)
    pseudo_class = staticmethod(pseudo_class)
    pseudo_element = staticmethod(pseudo_element)
    combine = staticmethod(combine)


css_selector_builder = CssSelectorBuilder()
