"""Tests for the JSON codec."""

import json
import math
from dataclasses import dataclass

import pytest

from objtasks.codec import decode_with_template, encode_to_text
from objtasks.config import CodecConfig
from objtasks.errors import EncodeError, ParseError
from objtasks.model import Rectangle, make_rectangle


class Circle:
    def __init__(self, radius):
        self.radius = radius

    def get_circumference(self):
        return 2 * math.pi * self.radius


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def norm2(self):
        return self.x * self.x + self.y * self.y


@dataclass(slots=True)
class Slotted:
    a: int
    b: str


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestEncode:
    def test_list(self):
        assert encode_to_text([1, 2, 3]) == "[1,2,3]"

    def test_key_order_is_insertion_order(self):
        assert encode_to_text({"width": 10, "height": 20}) == '{"width":10,"height":20}'
        assert encode_to_text({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_nested(self):
        value = {"a": [1, {"b": None}], "c": "text", "d": True}
        assert encode_to_text(value) == '{"a":[1,{"b":null}],"c":"text","d":true}'

    @pytest.mark.parametrize(
        "value",
        [0, -1.5, "héllo", [], {}, [1, [2, [3]]], {"k": {"nested": [True, False, None]}}],
    )
    def test_parses_back_equal(self, value):
        assert json.loads(encode_to_text(value)) == value

    def test_non_ascii_kept(self):
        assert encode_to_text("héllo") == '"héllo"'

    def test_dataclass_encodes_fields_only(self):
        assert encode_to_text(make_rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_encodes_instance_dict(self):
        assert encode_to_text(Circle(5)) == '{"radius":5}'

    def test_config_indent(self):
        text = encode_to_text({"a": 1}, CodecConfig(indent=2, separators=(",", ": ")))
        assert text == '{\n  "a": 1\n}'

    def test_unserializable_raises(self):
        with pytest.raises(EncodeError):
            encode_to_text({"s": {1, 2}})

    def test_nan_rejected_by_default(self):
        with pytest.raises(EncodeError):
            encode_to_text(float("nan"))

    def test_cycle_raises(self):
        value = []
        value.append(value)
        with pytest.raises(EncodeError):
            encode_to_text(value)

    def test_decoded_dataclass_missing_field(self):
        p = decode_with_template(Point, '{"x":1}')
        assert encode_to_text(p) == '{"x":1}'

    def test_decoded_extra_fields_kept(self):
        r = decode_with_template(Rectangle, '{"width":1,"height":2,"color":"red"}')
        assert encode_to_text(r) == '{"width":1,"height":2,"color":"red"}'

    def test_slotted_dataclass_uses_declared_fields(self):
        assert encode_to_text(Slotted(1, "b")) == '{"a":1,"b":"b"}'

    def test_slotted_dataclass_unset_field_raises(self):
        obj = Slotted.__new__(Slotted)
        object.__setattr__(obj, "a", 1)
        with pytest.raises(EncodeError):
            encode_to_text(obj)

    def test_class_object_rejected(self):
        with pytest.raises(EncodeError):
            encode_to_text(Circle)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestDecode:
    def test_plain_class(self):
        c = decode_with_template(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_circumference() == pytest.approx(20 * math.pi)

    def test_rectangle_round_trip(self):
        r = decode_with_template(Rectangle, encode_to_text(make_rectangle(3, 4)))
        assert isinstance(r, Rectangle)
        assert vars(r) == {"width": 3, "height": 4}
        assert r.area() == 12

    def test_instance_template_uses_its_class(self):
        r = decode_with_template(make_rectangle(1, 1), '{"width":2,"height":5}')
        assert type(r) is Rectangle
        assert r.area() == 10

    def test_frozen_dataclass(self):
        p = decode_with_template(Point, '{"x":3,"y":4}')
        assert p.norm2() == 25

    def test_init_not_called(self):
        class Strict:
            def __init__(self):
                raise AssertionError("__init__ must not run")

        obj = decode_with_template(Strict, '{"a":1}')
        assert obj.a == 1

    def test_extra_fields_installed(self):
        c = decode_with_template(Circle, '{"radius":1,"color":"red"}')
        assert c.color == "red"

    def test_malformed_text(self):
        with pytest.raises(ParseError) as exc_info:
            decode_with_template(Circle, '{"radius":')
        assert exc_info.value.line == 1
        assert exc_info.value.column is not None

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode_with_template(Circle, "not json")

    def test_non_object_rejected(self):
        with pytest.raises(TypeError):
            decode_with_template(Circle, "[1,2,3]")

    def test_dunder_keys_are_plain_data(self):
        c = decode_with_template(Circle, '{"radius":1,"__dict__":{}}')
        assert vars(c) == {"radius": 1, "__dict__": {}}
        assert c.radius == 1

    def test_class_key_does_not_change_type(self):
        obj = decode_with_template(Circle, '{"__class__":{"a":1}}')
        assert type(obj) is Circle
        assert vars(obj) == {"__class__": {"a": 1}}

    def test_template_without_instance_dict(self):
        with pytest.raises(TypeError):
            decode_with_template(Slotted, '{"a":1,"b":"x"}')
