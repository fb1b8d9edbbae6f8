"""TCP client that receives a packet stream and prints every complete packet."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from typing import Iterator, List, Optional, TextIO

from .packet_handler import PacketHandler

DEFAULT_HOST = "8.149.236.117"
DEFAULT_PORT = 8755
RECONNECT_MIN_DELAY = 1000
RECONNECT_MAX_DELAY = 10000
RECONNECT_DELAY_POLICY = 2
RECV_BUFSIZE = 65536
CONNECT_TIMEOUT = 5.0
POLL_INTERVAL = 0.2


def reconnect_delays(
    min_delay: int = RECONNECT_MIN_DELAY,
    max_delay: int = RECONNECT_MAX_DELAY,
    delay_policy: int = RECONNECT_DELAY_POLICY,
) -> Iterator[int]:
    """Yield successive reconnect delays in milliseconds, forever.

    Policy 0 keeps the delay fixed, 1 grows it linearly by ``min_delay``,
    and any larger value multiplies it by the policy; growth stops at ``max_delay``.
    """
    if min_delay < 0 or max_delay < 0:
        raise ValueError("delays must not be negative")
    if delay_policy < 0:
        raise ValueError("delay_policy must not be negative")
    delay = min_delay
    while True:
        yield delay
        if delay_policy == 0:
            continue
        if delay_policy == 1:
            delay += min_delay
        else:
            delay *= delay_policy
        delay = min(delay, max_delay)


class RecvClient:
    """Connects to a server, reconnecting with back-off, and prints packets."""

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        out: Optional[TextIO] = None,
    ) -> None:
        self.host = host
        self.port = port
        self._out = out
        self.handler = PacketHandler(self.output_whole)

    @property
    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def output_whole(self, msg: str) -> None:
        """Print one complete packet."""
        print(msg, file=self._stream)

    def feed(self, data: bytes) -> None:
        """Hand received bytes to the packet handler."""
        self.handler.add_msg(data.decode("latin-1"))

    def run(self, stop_event: Optional[threading.Event] = None) -> int:
        """Receive until ``stop_event`` is set; reconnect whenever the link drops."""
        stop = stop_event if stop_event is not None else threading.Event()
        try:
            socket.getaddrinfo(self.host, self.port, type=socket.SOCK_STREAM)
        except socket.gaierror as exc:
            raise ConnectionError(f"cannot resolve {self.host}") from exc
        print(f"client connect to port {self.port} ...", file=self._stream)
        delays: Optional[Iterator[int]] = None
        while not stop.is_set():
            try:
                sock = socket.create_connection(
                    (self.host, self.port), timeout=CONNECT_TIMEOUT
                )
            except OSError:
                if delays is None:
                    delays = reconnect_delays()
                stop.wait(next(delays) / 1000)
                continue
            delays = None
            with sock:
                self._serve(sock, stop)
        return 0

    def _serve(self, sock: socket.socket, stop: threading.Event) -> None:
        fd = sock.fileno()
        host, port = sock.getpeername()[:2]
        peer = f"{host}:{port}"
        print(f"connected to {peer}! connfd={fd}", file=self._stream)
        sock.settimeout(POLL_INTERVAL)
        while not stop.is_set():
            try:
                data = sock.recv(RECV_BUFSIZE)
            except socket.timeout:
                continue
            except OSError:
                break
            if not data:
                break
            self.feed(data)
        print(f"disconnected to {peer}! connfd={fd}", file=self._stream)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Receive and print framed packets.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    client = RecvClient(args.host, args.port)
    stop = threading.Event()
    worker = threading.Thread(target=client.run, args=(stop,), daemon=True)
    worker.start()
    try:
        input()
    except EOFError:
        pass
    stop.set()
    worker.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())