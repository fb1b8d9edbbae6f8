import pytest

from poolkit.hfile import HFile, file_size


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"hello world")
    return path


def test_write_then_readall_roundtrip(tmp_path):
    path = tmp_path / "out.bin"
    data = b"\x00\x01binary\xffdata"
    with HFile() as f:
        f.open(path, "wb")
        assert f.write(data) == len(data)
    with HFile() as f:
        f.open(path, "rb")
        assert f.readall() == data
        assert f.size() == len(data)


def test_write_accepts_text(tmp_path):
    path = tmp_path / "text.bin"
    with HFile() as f:
        f.open(path, "w")
        f.write("abc")
    assert path.read_bytes() == b"abc"


def test_readall_of_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    with HFile() as f:
        f.open(path, "rb")
        assert f.readall() == b""


def test_readline_handles_all_line_endings(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_bytes(b"a\nb\r\nc\rd")
    with HFile() as f:
        f.open(path, "rb")
        lines = [f.readline() for _ in range(5)]
    assert lines == [b"a", b"b", b"c", b"d", None]


def test_readline_returns_empty_line(tmp_path):
    path = tmp_path / "blank.txt"
    path.write_bytes(b"\nx")
    with HFile() as f:
        f.open(path, "rb")
        assert f.readline() == b""
        assert f.readline() == b"x"
        assert f.readline() is None


def test_readrange(sample):
    data = sample.read_bytes()
    with HFile() as f:
        f.open(sample, "rb")
        assert f.readrange(1, 3) == data[1:4]
        assert f.readrange(6) == data[6:]
        assert f.readrange(0, 1000) == data


def test_seek_and_tell(sample):
    with HFile() as f:
        f.open(sample, "rb")
        f.seek(6)
        assert f.tell() == 6
        assert f.read(5) == sample.read_bytes()[6:11]


def test_file_size(sample, tmp_path):
    assert file_size(sample) == len(sample.read_bytes())
    assert file_size(tmp_path / "missing") == 0


def test_open_missing_file_raises(tmp_path):
    f = HFile()
    with pytest.raises(FileNotFoundError):
        f.open(tmp_path / "missing", "rb")
    assert f.isopen() is False


def test_context_manager_closes(sample):
    with HFile() as f:
        f.open(sample, "rb")
        assert f.isopen() is True
    assert f.isopen() is False


def test_read_when_closed_raises():
    with pytest.raises(ValueError):
        HFile().read(1)


def test_rename_and_remove(sample, tmp_path):
    target = tmp_path / "renamed.bin"
    f = HFile()
    f.open(sample, "rb")
    f.rename(target)
    assert f.isopen() is False
    assert not sample.exists()
    assert target.exists()
    f.open(target, "rb")
    f.remove()
    assert not target.exists()