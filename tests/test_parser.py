import pytest

from spongenet.parser import NetParser, NetUnparser, ParseResult, as_string


@pytest.mark.parametrize(
    "result, name",
    [
        (ParseResult.NO_ERROR, "NoError"),
        (ParseResult.BAD_CHECKSUM, "BadChecksum"),
        (ParseResult.PACKET_TOO_SHORT, "PacketTooShort"),
        (ParseResult.WRONG_IP_VERSION, "WrongIPVersion"),
        (ParseResult.HEADER_TOO_SHORT, "HeaderTooShort"),
        (ParseResult.TRUNCATED_PACKET, "TruncatedPacket"),
    ],
)
def test_as_string(result, name):
    assert as_string(result) == name


def test_unparser_big_endian():
    assert bytes(NetUnparser().u16(0x1234)) == b"\x12\x34"
    assert bytes(NetUnparser().u32(0x01020304)) == b"\x01\x02\x03\x04"


def test_unparser_truncates():
    assert bytes(NetUnparser().u8(0x1FF)) == b"\xff"
    assert bytes(NetUnparser().u16(-1)) == b"\xff\xff"


def test_round_trip():
    data = bytes(NetUnparser().u32(0xDEADBEEF).u16(0xCAFE).u8(0x7F))
    parser = NetParser(data)
    assert parser.u32() == 0xDEADBEEF
    assert parser.u16() == 0xCAFE
    assert parser.u8() == 0x7F
    assert parser.has_error() is False
    assert parser.buffer() == b""


def test_short_buffer_sets_error():
    parser = NetParser(b"\x01")
    assert parser.u16() == 0
    assert parser.error is ParseResult.PACKET_TOO_SHORT
    assert parser.has_error() is True
    assert parser.buffer() == b"\x01"


def test_error_is_sticky():
    parser = NetParser(b"\x01\x02")
    parser.u32()
    assert parser.u8() == 0
    assert parser.buffer() == b"\x01\x02"


def test_remove_prefix():
    parser = NetParser(b"\x00\x00\x00\x2a")
    parser.remove_prefix(3)
    assert parser.u8() == 0x2A
    assert parser.has_error() is False


def test_remove_prefix_too_far():
    parser = NetParser(b"ab")
    parser.remove_prefix(3)
    assert parser.error is ParseResult.PACKET_TOO_SHORT
    assert parser.buffer() == b"ab"


def test_error_can_be_set():
    parser = NetParser(b"\x05")
    parser.error = ParseResult.BAD_CHECKSUM
    assert parser.u8() == 0
    assert parser.error is ParseResult.BAD_CHECKSUM