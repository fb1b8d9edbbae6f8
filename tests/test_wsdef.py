import pytest

from poolkit.wsdef import (
    Opcode,
    SessionType,
    min_frame_size,
    ping_frame,
    pong_frame,
)


def test_server_frames():
    assert ping_frame(SessionType.SERVER) == b"\x89\x00"
    assert pong_frame(SessionType.SERVER) == b"\x8a\x00"


def test_client_frames():
    assert ping_frame(SessionType.CLIENT) == b"\x89\x80WSWS"
    assert pong_frame(SessionType.CLIENT) == b"\x8a\x80WSWS"


def test_min_frame_sizes():
    assert min_frame_size(SessionType.SERVER) == 2
    assert min_frame_size(SessionType.CLIENT) == 6


@pytest.mark.parametrize("side", list(SessionType))
def test_control_frames_are_minimal(side):
    assert len(ping_frame(side)) == min_frame_size(side)
    assert len(pong_frame(side)) == min_frame_size(side)


@pytest.mark.parametrize("side", list(SessionType))
def test_frame_opcode_and_fin(side):
    assert ping_frame(side)[0] == 0x80 | Opcode.PING
    assert pong_frame(side)[0] == 0x80 | Opcode.PONG


def test_client_frames_are_masked():
    assert ping_frame(SessionType.CLIENT)[1] & 0x80 == 0x80
    assert ping_frame(SessionType.SERVER)[1] & 0x80 == 0


def test_opcode_values():
    assert Opcode.TEXT == 0x1
    assert Opcode.CLOSE == 0x8
    assert Opcode(0xA) is Opcode.PONG


def test_unknown_session_type_rejected():
    with pytest.raises(ValueError):
        ping_frame(5)