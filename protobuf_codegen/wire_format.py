import enum


class WireType(enum.Enum):
    """
    How the bytes of a serialized protobuf field are laid out.

    The value of each member is the name of the matching variant in the
    ``::protobuf::wire_format`` module of the Rust runtime, which is what
    generated code must reference.
    """
    VARINT = "WireTypeVarint"
    FIXED64 = "WireTypeFixed64"
    LENGTH_DELIMITED = "WireTypeLengthDelimited"
    START_GROUP = "WireTypeStartGroup"
    END_GROUP = "WireTypeEndGroup"
    FIXED32 = "WireTypeFixed32"

    @property
    def number(self) -> int:
        """The 3-bit tag value used on the wire."""
        return _NUMBERS[self]

    @classmethod
    def from_number(cls, number: int) -> "WireType":
        for ty, n in _NUMBERS.items():
            if n == number:
                return ty
        raise ValueError(f"unknown wire type number: {number}")


_NUMBERS = {
    WireType.VARINT: 0,
    WireType.FIXED64: 1,
    WireType.LENGTH_DELIMITED: 2,
    WireType.START_GROUP: 3,
    WireType.END_GROUP: 4,
    WireType.FIXED32: 5,
}
