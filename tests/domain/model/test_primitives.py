from __future__ import annotations

import pytest

from jsmdeploy.domain.model import PrimitiveType, canonical_number_string, convert_primitive


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (42, "42"),
        (42.0, "42"),
        (4.5, "4.5"),
        (-3, "-3"),
        (-0.0, "0"),
        (1e16, "10000000000000000"),
        (1e21, "1e+21"),
        (1.5e300, "1.5e+300"),
        (1e-5, "0.00001"),
        (1e-7, "1e-7"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (float("nan"), "NaN"),
    ],
)
def test_canonical_number_string(value: float, expected: str) -> None:
    assert canonical_number_string(value) == expected


def test_convert_to_string_only_touches_numbers() -> None:
    assert convert_primitive(7, PrimitiveType.STRING) == "7"
    assert convert_primitive(True, PrimitiveType.STRING) is True
    assert convert_primitive(None, PrimitiveType.STRING) is None


def test_convert_to_number() -> None:
    assert convert_primitive("12", PrimitiveType.NUMBER) == 12
    assert convert_primitive(" 1.5 ", PrimitiveType.NUMBER) == 1.5
    assert convert_primitive("twelve", PrimitiveType.NUMBER) == "twelve"


def test_convert_to_boolean() -> None:
    assert convert_primitive("TRUE", PrimitiveType.BOOLEAN) is True
    assert convert_primitive("false", PrimitiveType.BOOLEAN) is False
    assert convert_primitive("maybe", PrimitiveType.BOOLEAN) == "maybe"


def test_unknown_leaves_value_alone() -> None:
    payload = {"a": 1}
    assert convert_primitive(payload, PrimitiveType.UNKNOWN) is payload
