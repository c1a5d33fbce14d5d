"""JSON text codec: encode plain data, decode it back onto a class."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

from objtasks.config import DEFAULT_CONFIG, CodecConfig
from objtasks.errors import EncodeError, ParseError

__all__ = ["encode_to_text", "decode_with_template"]

logger = logging.getLogger(__name__)


def _instance_fields(obj: Any) -> dict[str, Any]:
    """Fallback for json.dumps: serialise an object as its instance fields."""
    if isinstance(obj, type):
        raise TypeError(f"Class {obj.__name__} is not JSON serializable")
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    # slotted dataclass
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_to_text(value: Any, config: CodecConfig = DEFAULT_CONFIG) -> str:
    """Return the JSON representation of *value*.

    Dict keys keep their insertion order. Dataclasses and plain objects are
    written as their instance fields; methods are not part of the output.

    Example:
        encode_to_text([1, 2, 3])                        # => '[1,2,3]'
        encode_to_text({"width": 10, "height": 20})      # => '{"width":10,"height":20}'
    """
    try:
        return json.dumps(
            value,
            indent=config.indent,
            separators=config.separators,
            ensure_ascii=config.ensure_ascii,
            allow_nan=config.allow_nan,
            default=_instance_fields,
        )
    except (TypeError, ValueError, AttributeError) as exc:
        raise EncodeError(str(exc)) from exc


def decode_with_template(template: Any, text: str) -> Any:
    """Parse *text* and return a *template* instance carrying the decoded fields.

    *template* is a class (an instance is accepted and its class used). The
    new object is created without calling ``__init__``; every key of the
    decoded JSON object becomes an instance attribute, so the template's
    methods operate on the decoded data.

    Example:
        r = decode_with_template(Rectangle, '{"width":10,"height":20}')
        r.area()    # => 200
    """
    cls = template if isinstance(template, type) else type(template)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object to decode into {cls.__name__}, "
            f"got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    if not hasattr(obj, "__dict__"):
        raise TypeError(
            f"Cannot decode into {cls.__name__}: its instances have no __dict__"
        )
    # every key is plain instance data, dunder names included
    vars(obj).update(data)
    logger.debug("Decoded %d field(s) into %s", len(data), cls.__name__)
    return obj
