"""WebSocket header names, opcodes and the fixed ping and pong frames."""

from __future__ import annotations

import enum

SEC_WEBSOCKET_VERSION = "Sec-WebSocket-Version"
SEC_WEBSOCKET_KEY = "Sec-WebSocket-Key"
SEC_WEBSOCKET_ACCEPT = "Sec-WebSocket-Accept"
SEC_WEBSOCKET_PROTOCOL = "Sec-WebSocket-Protocol"
SEC_WEBSOCKET_EXTENSIONS = "Sec-WebSocket-Extensions"

WS_SERVER_MIN_FRAME_SIZE = 2
WS_SERVER_PING_FRAME = b"\x89\x00"
WS_SERVER_PONG_FRAME = b"\x8a\x00"

WS_CLIENT_MIN_FRAME_SIZE = 6
WS_CLIENT_PING_FRAME = b"\x89\x80WSWS"
WS_CLIENT_PONG_FRAME = b"\x8a\x80WSWS"


class SessionType(enum.Enum):
    CLIENT = 0
    SERVER = 1


class Opcode(enum.IntEnum):
    CONTINUE = 0x0
    TEXT = 0x1
    BINARY = 0x2
    CLOSE = 0x8
    PING = 0x9
    PONG = 0xA


def ping_frame(session_type: SessionType) -> bytes:
    """The complete ping frame sent by the given side; clients mask theirs."""
    if SessionType(session_type) is SessionType.SERVER:
        return WS_SERVER_PING_FRAME
    return WS_CLIENT_PING_FRAME


def pong_frame(session_type: SessionType) -> bytes:
    """The complete pong frame sent by the given side; clients mask theirs."""
    if SessionType(session_type) is SessionType.SERVER:
        return WS_SERVER_PONG_FRAME
    return WS_CLIENT_PONG_FRAME


def min_frame_size(session_type: SessionType) -> int:
    """Smallest frame the given side can send: header plus mask for clients."""
    if SessionType(session_type) is SessionType.SERVER:
        return WS_SERVER_MIN_FRAME_SIZE
    return WS_CLIENT_MIN_FRAME_SIZE