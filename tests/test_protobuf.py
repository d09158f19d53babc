import pytest

from tinkerkit.protobuf import (
    Field,
    FieldValue,
    Person,
    PhoneNumber,
    ProtobufError,
    WireType,
    parse_field,
    parse_message,
    parse_varint,
    unpack_tag,
)


def _varint(n):
    out = bytearray()
    while True:
        byte = n & 0x7F
        n >>= 7
        if n:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _tag(num, wire):
    return _varint((num << 3) | wire)


def _len_field(num, payload):
    return _tag(num, 2) + _varint(len(payload)) + payload


def _varint_field(num, value):
    return _tag(num, 0) + _varint(value)


def test_parse_varint_documented_example():
    assert parse_varint(b"\x96\x01") == (150, b"")


def test_parse_varint_returns_remainder():
    assert parse_varint(b"\x05rest") == (5, b"rest")


@pytest.mark.parametrize("value", [0, 1, 127, 128, 300, 2**49 - 1])
def test_parse_varint_round_trip(value):
    assert parse_varint(_varint(value) + b"x") == (value, b"x")


@pytest.mark.parametrize("data", [b"", b"\x80", _varint(2**49)])
def test_parse_varint_invalid(data):
    with pytest.raises(ProtobufError, match="Invalid varint"):
        parse_varint(data)


def test_unpack_tag():
    assert unpack_tag((3 << 3) | 2) == (3, WireType.LEN)
    assert unpack_tag((9 << 3) | 5) == (9, WireType.I32)


@pytest.mark.parametrize("wire", [1, 3, 4, 6, 7])
def test_unpack_tag_invalid_wire_type(wire):
    with pytest.raises(ProtobufError, match="Invalid wire-type"):
        unpack_tag((1 << 3) | wire)


def test_parse_field_varint():
    parsed, rest = parse_field(_varint_field(4, 99) + b"z")
    assert parsed.field_num == 4
    assert parsed.value.as_u64() == 99
    assert rest == b"z"


def test_parse_field_len():
    parsed, rest = parse_field(_len_field(2, b"hello") + b"!")
    assert parsed == Field(2, FieldValue(WireType.LEN, b"hello"))
    assert parsed.value.as_string() == "hello"
    assert rest == b"!"


def test_parse_field_i32_negative():
    data = _tag(7, 5) + (-5).to_bytes(4, "little", signed=True)
    parsed, rest = parse_field(data)
    assert parsed.value == FieldValue(WireType.I32, -5)
    assert rest == b""


@pytest.mark.parametrize(
    "data",
    [_tag(1, 2) + _varint(5) + b"ab", _tag(1, 5) + b"\x01\x02"],
)
def test_parse_field_unexpected_eof(data):
    with pytest.raises(ProtobufError, match="Unexpected EOF"):
        parse_field(data)


def test_field_value_wrong_wire_type():
    with pytest.raises(ProtobufError, match="Unexpected wire-type"):
        FieldValue(WireType.LEN, b"x").as_u64()
    with pytest.raises(ProtobufError, match="Unexpected wire-type"):
        FieldValue(WireType.VARINT, 3).as_string()
    with pytest.raises(ProtobufError, match="Unexpected wire-type"):
        FieldValue(WireType.I32, 3).as_bytes()


def test_field_value_invalid_utf8():
    with pytest.raises(ProtobufError, match="not UTF-8"):
        FieldValue(WireType.LEN, b"\xff\xfe").as_string()


def test_parse_person():
    phone1 = _len_field(1, b"ext-1") + _len_field(2, b"home")
    phone2 = _len_field(1, b"ext-2") + _len_field(2, b"mobile")
    data = (
        _len_field(1, b"alice")
        + _varint_field(2, 7)
        + _len_field(3, phone1)
        + _len_field(3, phone2)
    )
    person = parse_message(data, Person)
    assert person == Person(
        name="alice",
        id=7,
        phone=[PhoneNumber("ext-1", "home"), PhoneNumber("ext-2", "mobile")],
    )


def test_parse_empty_message():
    assert parse_message(b"", Person) == Person()


def test_person_rejects_i32():
    data = _tag(1, 5) + (1).to_bytes(4, "little")
    with pytest.raises(ProtobufError, match="Invalid Field"):
        parse_message(data, Person)


def test_phone_number_fills_in_order():
    number = PhoneNumber()
    number.add_field(Field(1, FieldValue(WireType.LEN, b"first")))
    number.add_field(Field(2, FieldValue(WireType.LEN, b"second")))
    assert number == PhoneNumber("first", "second")


def test_phone_number_rejects_varint():
    with pytest.raises(ProtobufError, match="Invalid Field"):
        PhoneNumber().add_field(Field(1, FieldValue(WireType.VARINT, 1)))


def test_parse_message_truncated():
    with pytest.raises(ProtobufError):
        parse_message(_tag(1, 2) + _varint(10) + b"short", Person)