import pytest

from roswire.core.codec.header import decode_header, encode_header
from roswire.core.errors import InvalidValue, MalformedHeader, TruncatedInput
from tests.helpers import TYPICAL_HEADER


@pytest.mark.ut
def test_decode_typical_header():
    fields, consumed = decode_header(TYPICAL_HEADER)

    assert consumed == len(TYPICAL_HEADER)
    assert fields == {
        "message_definition": "string data\n\n",
        "callerid": "/rostopic_4767_1316912741557",
        "latching": "1",
        "md5sum": "992ce8a1687cec8c8bd883ec73ca41d1",
        "topic": "/chatter",
        "type": "std_msgs/String",
    }


@pytest.mark.ut
def test_encode_typical_header():
    fields, _ = decode_header(TYPICAL_HEADER)
    assert encode_header(fields) == TYPICAL_HEADER


@pytest.mark.ut
def test_empty_header():
    assert encode_header({}) == b"\x00\x00\x00\x00"
    assert decode_header(b"\x00\x00\x00\x00") == ({}, 4)


@pytest.mark.ut
def test_single_entry():
    data = bytes([11, 0, 0, 0, 7, 0, 0, 0, 97, 98, 99, 61, 49, 50, 51])
    assert decode_header(data) == ({"abc": "123"}, 15)


@pytest.mark.ut
def test_value_may_contain_separator():
    data = encode_header({"message_definition": "int32 A=1"})
    assert decode_header(data)[0] == {"message_definition": "int32 A=1"}


@pytest.mark.ut
def test_empty_value_is_allowed():
    assert decode_header(encode_header({"error": ""}))[0] == {"error": ""}


@pytest.mark.ut
@pytest.mark.parametrize("key", ["", "a=b"])
def test_invalid_key(key):
    with pytest.raises(InvalidValue):
        encode_header({key: "value"})


@pytest.mark.ut
def test_entry_without_separator():
    data = bytes([7, 0, 0, 0, 3, 0, 0, 0, 97, 98, 99])
    with pytest.raises(MalformedHeader):
        decode_header(data)


@pytest.mark.ut
def test_entry_overrunning_the_block():
    # Block is 8 bytes but the entry claims 10
    data = bytes([8, 0, 0, 0, 10, 0, 0, 0, 97, 61, 98, 99]) + b"tail_bytes"
    with pytest.raises(MalformedHeader):
        decode_header(data)


@pytest.mark.ut
@pytest.mark.parametrize("cut", [0, 3, 4, 50, len(TYPICAL_HEADER) - 1])
def test_truncated_header(cut):
    with pytest.raises(TruncatedInput):
        decode_header(TYPICAL_HEADER[:cut])
