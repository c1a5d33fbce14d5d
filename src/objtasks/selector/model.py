"""Selector model: Category, Combinator, Selector and CompositeSelector."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


class Category(Enum):
    """Selector part kinds, declared in the order they must be added.

    The value is the rank; a part may only be added while no part of a
    higher rank is present.
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def repeatable(self) -> bool:
        """True for parts that may occur several times (class, attribute, pseudo-class)."""
        return self in (Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS)

    def __lt__(self, other: Category) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.value < other.value


class Combinator(Enum):
    """CSS combinators accepted by combine()."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders to selector text: a selector or a composite node."""

    def stringify(self) -> str: ...


@dataclass
class Selector:
    """Accumulated parts of one compound selector, unrendered.

    Rendered form::

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None

    def stringify(self) -> str:
        parts = [
            self.element or "",
            f"#{self.id}" if self.id is not None else "",
            "".join(f".{c}" for c in self.classes),
            "".join(f"[{a}]" for a in self.attributes),
            "".join(f":{p}" for p in self.pseudo_classes),
            f"::{self.pseudo_element}" if self.pseudo_element is not None else "",
        ]
        return "".join(parts)


@dataclass(frozen=True)
class CompositeSelector:
    """Two renderable children joined by a combinator."""

    left: Renderable
    combinator: Combinator
    right: Renderable

    def stringify(self) -> str:
        return (
            f"{self.left.stringify()} {self.combinator.value} "
            f"{self.right.stringify()}"
        )

    def __str__(self) -> str:
        return self.stringify()
