import json

import pytest

from css_selector_builder.utils import serialize, deserialize
from css_selector_builder.models import Rectangle
from css_selector_builder.exceptions import ParseError

class Circle:
    def __init__(self, radius):
        self.radius = radius

    def get_circumference(self):
        return 2 * 3.14159 * self.radius

def test_serialize():
    test_cases = [
        ([1, 2, 3], '[1,2,3]'),
        ({"height": 10, "width": 20}, '{"height":10,"width":20}'),
        ("text", '"text"'),
        (None, 'null'),
    ]

    for value, expected in test_cases:
        assert serialize(value) == expected

def test_serialize_rectangle():
    assert serialize(Rectangle(10, 20)) == '{"width":10,"height":20}'

def test_serialize_plain_object():
    assert serialize(Circle(10)) == '{"radius":10}'
    assert serialize({"shape": Circle(1)}) == '{"shape":{"radius":1}}'

def test_serialize_then_deserialize_plain_object():
    restored = deserialize(Circle, serialize(Circle(10)))
    assert isinstance(restored, Circle)
    assert restored.radius == 10

@pytest.mark.parametrize("value", [object(), {1, 2}, [Circle(1), object()]])
def test_serialize_unsupported_value(value):
    with pytest.raises(ParseError, match="Cannot serialize value"):
        serialize(value)

@pytest.mark.parametrize("value", [[float("nan")], {"width": float("inf")}, -float("inf")])
def test_serialize_rejects_non_finite_numbers(value):
    with pytest.raises(ParseError, match="Cannot serialize value"):
        serialize(value)

def test_deserialize_from_class():
    r = deserialize(Rectangle, '{"width":10, "height":20}')
    assert isinstance(r, Rectangle)
    assert r.area() == 200

def test_deserialize_from_instance():
    c = deserialize(Circle(1), '{"radius":10}')
    assert isinstance(c, Circle)
    assert c.radius == 10
    assert c.get_circumference() == pytest.approx(62.8318)

def test_deserialize_uses_document_order():
    r = deserialize(Rectangle, '{"height":5,"width":2}')
    # Values are passed positionally, so keys are ignored
    assert r.width == 5
    assert r.height == 2

def test_serialize_then_deserialize_rectangle():
    original = Rectangle(7, 3)
    restored = deserialize(Rectangle, serialize(original))
    assert restored == original

def test_deserialize_invalid_json():
    with pytest.raises(ParseError, match="Invalid JSON string"):
        deserialize(Rectangle, "invalid json")

def test_deserialize_requires_object():
    with pytest.raises(ParseError, match="Expected a JSON object"):
        deserialize(Rectangle, json.dumps([10, 20]))

def test_deserialize_wrong_arity():
    with pytest.raises(ParseError, match="Cannot build Circle"):
        deserialize(Circle, '{"radius":1,"extra":2}')

def test_deserialize_invalid_values():
    with pytest.raises(ParseError, match="Cannot build Rectangle"):
        deserialize(Rectangle, '{"width":"wide","height":"tall"}')
