"""objtasks - object helpers: a rectangle record, a JSON codec and a CSS selector builder."""

from objtasks.codec import decode_with_template, encode_to_text
from objtasks.config import DEFAULT_CONFIG, CodecConfig
from objtasks.errors import (
    DuplicateCategoryError,
    EncodeError,
    InvalidCombinatorError,
    ObjtasksError,
    OutOfOrderError,
    ParseError,
    SelectorError,
)
from objtasks.model import Rectangle, make_rectangle
from objtasks.selector import SelectorBuilder, combine, css_selector_builder

__version__ = "0.1.0"

__all__ = [
    # model
    "Rectangle",
    "make_rectangle",
    # codec
    "encode_to_text",
    "decode_with_template",
    "CodecConfig",
    "DEFAULT_CONFIG",
    # selector
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
    # errors
    "ObjtasksError",
    "SelectorError",
    "DuplicateCategoryError",
    "OutOfOrderError",
    "InvalidCombinatorError",
    "ParseError",
    "EncodeError",
]
