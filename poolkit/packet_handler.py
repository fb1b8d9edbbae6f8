"""Splits a stream of text into length-prefixed packets.

A packet is the ten-character marker ``"aaaaaaaaaa"``, a three-digit
decimal body length and the body itself.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

_log = logging.getLogger(__name__)

HEADER_CHECK = "aaaaaaaaaa"
HEADER_CHECK_LEN = len(HEADER_CHECK)
SOCK_HEADER_LEN = 13

PacketCallback = Callable[[str], None]

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    """Parse a leading decimal integer the lenient way; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def is_whole_packet(msg: str) -> bool:
    """True if ``msg`` is exactly one packet: marker, length field and body."""
    if len(msg) < SOCK_HEADER_LEN or msg[:HEADER_CHECK_LEN] != HEADER_CHECK:
        return False
    body_len = _atoi(msg[HEADER_CHECK_LEN:SOCK_HEADER_LEN])
    return len(msg) == SOCK_HEADER_LEN + body_len


class PacketHandler:
    """Reassembles packets from received chunks and hands each to a callback."""

    def __init__(self, on_packet: Optional[PacketCallback] = None) -> None:
        self._on_packet = on_packet
        self._remain = ""

    def set_callback(self, on_packet: Optional[PacketCallback]) -> None:
        """Replace the function that receives complete packets."""
        self._on_packet = on_packet

    @property
    def remainder(self) -> str:
        """The incomplete tail kept back for the next chunk."""
        return self._remain

    def add_msg(self, msg: str) -> None:
        """Process one received chunk."""
        if is_whole_packet(msg):
            self._deliver(msg)
            self._remain = ""
            return
        _log.debug("partial or merged chunk: %r", msg)
        self._split(msg)
        if self._remain:
            _log.debug("remainder: %r", self._remain)

    def _deliver(self, msg: str) -> None:
        if self._on_packet is None:
            raise RuntimeError("no packet callback set")
        self._on_packet(msg)

    def _split(self, msg: str) -> None:
        msg = self._remain + msg
        while True:
            pos = msg.find(HEADER_CHECK)
            if pos < 0:
                break
            msg = msg[pos:]
            pos = msg.find(HEADER_CHECK, HEADER_CHECK_LEN)
            if pos < 0:
                if is_whole_packet(msg):
                    self._deliver(msg)
                else:
                    self._remain = msg
                break
            candidate = msg[:pos]
            if is_whole_packet(candidate):
                self._deliver(candidate)
            msg = msg[pos:]