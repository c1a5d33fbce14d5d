from objtasks.selector.builder import (
    CssSelectorBuilder,
    SelectorBuilder,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
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
    "Category",
    "Combinator",
    "CompositeSelector",
    "Renderable",
    "Selector",
]
