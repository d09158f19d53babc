"""Decoding a small subset of the protocol buffer wire format."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TypeVar, Union

_MAX_VARINT_BYTES = 7


class ProtobufError(Exception):
    """Raised when a message cannot be decoded."""


class WireType(Enum):
    """A wire type as seen on the wire."""

    VARINT = 0
    LEN = 2
    I32 = 5


@dataclass(frozen=True)
class FieldValue:
    """A field's value, typed by its wire type."""

    wire_type: WireType
    value: Union[int, bytes]

    def as_string(self) -> str:
        """Return a length-delimited value decoded as UTF-8."""
        data = self.as_bytes()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ProtobufError("Invalid string (not UTF-8)") from exc

    def as_bytes(self) -> bytes:
        """Return the raw bytes of a length-delimited value."""
        if self.wire_type is not WireType.LEN:
            raise ProtobufError("Unexpected wire-type")
        return bytes(self.value)

    def as_u64(self) -> int:
        """Return the integer held by a varint value."""
        if self.wire_type is not WireType.VARINT:
            raise ProtobufError("Unexpected wire-type")
        return int(self.value)


@dataclass(frozen=True)
class Field:
    """A field number together with its value."""

    field_num: int
    value: FieldValue


class _Message(Protocol):
    def add_field(self, field: Field) -> None: ...


M = TypeVar("M", bound=_Message)


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a varint, returning its value and the remaining bytes."""
    data = bytes(data)
    for i in range(_MAX_VARINT_BYTES):
        if i >= len(data):
            raise ProtobufError("Invalid varint")
        if data[i] & 0x80 == 0:
            value = 0
            for byte in reversed(data[: i + 1]):
                value = (value << 7) | (byte & 0x7F)
            return value, data[i + 1 :]
    raise ProtobufError("Invalid varint")


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into its field number and wire type."""
    try:
        wire_type = WireType(tag & 0x7)
    except ValueError as exc:
        raise ProtobufError("Invalid wire-type") from exc
    return tag >> 3, wire_type


def parse_field(data: bytes) -> tuple[Field, bytes]:
    """Parse one field, returning it and the remaining bytes."""
    tag, remainder = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    if wire_type is WireType.VARINT:
        value, remainder = parse_varint(remainder)
    elif wire_type is WireType.LEN:
        length, remainder = parse_varint(remainder)
        if len(remainder) < length:
            raise ProtobufError("Unexpected EOF")
        value, remainder = remainder[:length], remainder[length:]
    else:
        if len(remainder) < 4:
            raise ProtobufError("Unexpected EOF")
        value = int.from_bytes(remainder[:4], "little", signed=True)
        remainder = remainder[4:]
    return Field(field_num, FieldValue(wire_type, value)), remainder


def parse_message(data: bytes, message_type: type[M]) -> M:
    """Parse every field in ``data`` into a new ``message_type`` instance."""
    result = message_type()
    data = bytes(data)
    while data:
        parsed, data = parse_field(data)
        result.add_field(parsed)
    return result


@dataclass
class PhoneNumber:
    number: str = ""
    type_: str = ""

    def add_field(self, field: Field) -> None:
        """Fill the number first, then the type."""
        if field.value.wire_type is not WireType.LEN:
            raise ProtobufError("Invalid Field")
        value = field.value.as_string()
        if not self.number:
            self.number = value
        else:
            self.type_ = value


@dataclass
class Person:
    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = field(default_factory=list)

    def add_field(self, field: Field) -> None:
        """Take a varint as the id, the first string as the name, later ones as phones."""
        wire_type = field.value.wire_type
        if wire_type is WireType.VARINT:
            self.id = field.value.as_u64()
        elif wire_type is WireType.LEN:
            if not self.name:
                self.name = field.value.as_string()
                return
            number, rest = parse_field(field.value.as_bytes())
            kind, _ = parse_field(rest)
            phone_number = PhoneNumber()
            phone_number.add_field(number)
            phone_number.add_field(kind)
            self.phone.append(phone_number)
        else:
            raise ProtobufError("Invalid Field")