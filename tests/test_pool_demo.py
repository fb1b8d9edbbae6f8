import io
import threading

from poolkit.pool_demo import execute_with_threadpool, main, run_task


def test_run_task_prints_message():
    out = io.StringIO()
    run_task("hello", 0, 0, threading.Lock(), out)
    assert out.getvalue() == "hello\n"


def test_execute_prints_every_task_then_end_and_release():
    out = io.StringIO()
    events = execute_with_threadpool(count=6, initial_threads=2, max_threads=4, delay=0.01, out=out)
    lines = out.getvalue().splitlines()
    assert lines[-2:] == ["end.", "release."]
    body = lines[:-2]
    event_lines = [line for line in body if line.startswith("prefix, ")]
    task_lines = [line for line in body if not line.startswith("prefix, ")]
    assert sorted(task_lines, key=int) == [str(i) for i in range(1, 7)]
    assert event_lines == [f"prefix, {e}" for e in events]
    assert all(e.startswith("resize-to:") for e in events)


def test_main_reports_timing(capsys):
    rc = main(["--count", "3", "--initial", "1", "--max", "2", "--delay", "0"])
    captured = capsys.readouterr().out
    assert rc == 0
    assert "release." in captured
    assert captured.splitlines()[-1].startswith("ExecuteWithThreadpool:")