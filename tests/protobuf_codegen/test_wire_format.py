import pytest

from protobuf_codegen import WireType


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (0, WireType.VARINT),
        (1, WireType.FIXED64),
        (2, WireType.LENGTH_DELIMITED),
        (3, WireType.START_GROUP),
        (4, WireType.END_GROUP),
        (5, WireType.FIXED32),
    ],
)
def test_from_number(number, expected):
    assert WireType.from_number(number) is expected
    assert expected.number == number


@pytest.mark.parametrize("number", [-1, 6, 7])
def test_from_unknown_number(number):
    with pytest.raises(ValueError):
        WireType.from_number(number)


def test_values_are_runtime_variant_names():
    assert WireType.VARINT.value == "WireTypeVarint"
    assert WireType.LENGTH_DELIMITED.value == "WireTypeLengthDelimited"
