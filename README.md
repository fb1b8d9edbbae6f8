# poolkit

A small toolkit for concurrent and networked programs. It needs only the
standard library and runs on Python 3.10 or newer.

- **`poolkit.threadpool`**: `ThreadPool` is a FIFO worker pool that can be
  resized. It offers `schedule`, `wait`, `clear`, `resize` and `shutdown`, and
  shutdown behaviour is chosen with `ShutdownPolicy`. When used as a context
  manager, the pool shuts down on exit. The module also provides the helpers
  `ScopeGuard` and `LockedRef`.
- **`poolkit.dynpool`**: `DynamicPool` is a `ThreadPool` that adds ten workers
  whenever every worker is busy, up to `max_threads`. Each resize is reported
  through an optional callback as `"resize-to:<n>"`, with `". max!"` appended
  once the limit is reached.
- **`poolkit.pool_demo`**: `run_task` and `execute_with_threadpool` drive a
  `DynamicPool` with a batch of sleeping tasks. `main` is the entry point for
  the demo command.
- **`poolkit.objectpool`**: `ObjectPool` is a bounded pool of reusable objects.
  The borrow timeout is given in seconds, and `borrowed()` is a context manager
  that gives the object back afterwards.
- **`poolkit.connpool`**: `ConnPool` is a FIFO store of idle connections.
  `ClientTask` and `ClientContext` keep track of requests, callbacks and timers.
- **`poolkit.packet_handler`**: `PacketHandler` and `is_whole_packet` split a
  text stream into packets. Each packet is `aaaaaaaaaa`, then a three-digit
  length, then the body. An incomplete tail is kept in `remainder` until the
  rest arrives.
- **`poolkit.recv_client`**: `RecvClient` is a TCP client that passes received
  data through a `PacketHandler` and prints each whole packet. It reconnects
  with back-off, and `reconnect_delays` yields the delay schedule it uses.
- **`poolkit.varint`**: `varint_encode`, `varint_decode`, `floor2e` and
  `ceil2e`.
- **`poolkit.digest`**: `md5`, `md5_hex`, `sha1` and `sha1_hex`.
- **`poolkit.wsdef`**: the WebSocket `Opcode` and `SessionType`, the header
  names, and `ping_frame`, `pong_frame` and `min_frame_size`.
- **`poolkit.hfile`**: `HFile` is a binary file with whole-file, line and range
  reads. `file_size` returns a file's size.
- **`poolkit.hthread`**: `HThread` is a thread that repeats a task and can be
  started, stopped, paused and resumed. How it waits between runs is set with
  `SleepPolicy`, and its state is one of `Status`.
- **`poolkit.strutil`**: `to_string`, `from_string`, `case_less`,
  `CaseInsensitiveDict`, `MultiMap`, `FormData` and `FormFile`.
- **`poolkit.bits`**: bit, byte and word helpers with fixed-width integer
  results, such as `makeword`, `hiword`, `makeint64` and `make_fourcc`.
- **`poolkit.events`**: `Event` and `Timer` hold callbacks.

## Thread pools

```python
from poolkit.threadpool import ThreadPool

with ThreadPool(4) as pool:
    for n in range(10):
        pool.schedule(lambda n=n: print(n * n))
    pool.wait()
```

A pool that grows under load:

```python
from poolkit.dynpool import DynamicPool

pool = DynamicPool(4, 500, print)   # print receives messages such as "resize-to:14"
for n in range(100):
    pool.schedule(lambda n=n: print(n))
pool.wait()
pool.shutdown()
```

## Splitting a packet stream

```python
from poolkit.packet_handler import PacketHandler

packets = []
handler = PacketHandler(packets.append)
handler.add_msg("111aaaaaaaaaa004uuuuaaaaaaaaaa005bbbbb")
# packets == ["aaaaaaaaaa004uuuu", "aaaaaaaaaa005bbbbb"]
```

## Borrowing pooled objects

```python
from poolkit.objectpool import ObjectPool

pool = ObjectPool(dict, 0, 4, 3.0)
with pool.borrowed() as obj:
    obj["used"] = True
```

## Commands

- `poolkit-pool-demo [--count N] [--initial N] [--max N] [--delay SECONDS]`
  schedules sleeping tasks on a `DynamicPool`. It prints each task's message
  and each resize event, and then prints the elapsed time.
- `poolkit-recv [--host HOST] [--port PORT]` connects to a TCP server and
  prints every whole packet it receives. It stops when Enter is pressed.

## What it does not do

There is no HTTP or WebSocket client or server here. `ConnPool`,
`ClientContext` and the `wsdef` frames are building blocks only. Nothing in
the package sends requests, parses HTTP messages or builds WebSocket frames
other than the fixed ping and pong frames.

## Tests

Install the `test` extra and run `pytest` from the project directory.