import pytest

from poolkit.digest import md5, md5_hex, sha1, sha1_hex


def test_md5_known_vector():
    assert md5_hex(b"abc") == "900150983cd24fb0d6963f7d28e17f72"


def test_sha1_known_vector():
    assert sha1_hex(b"abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_md5_raw_matches_hex():
    data = b"hello world"
    assert len(md5(data)) == 16
    assert md5(data).hex() == md5_hex(data)


def test_sha1_raw_matches_hex():
    data = b"hello world"
    assert len(sha1(data)) == 20
    assert sha1(data).hex() == sha1_hex(data)


def test_str_input_is_utf8():
    assert md5("abc") == md5(b"abc")
    assert sha1("abc") == sha1(b"abc")


def test_hex_truncated_to_outputlen():
    full = md5_hex(b"data")
    assert md5_hex(b"data", 10) == full[:10]
    assert len(md5_hex(b"data", 100)) == 32
    assert sha1_hex(b"data", 7) == sha1_hex(b"data")[:7]
    assert len(sha1_hex(b"data", 100)) == 40


def test_zero_outputlen_gives_empty():
    assert md5_hex(b"x", 0) == ""


def test_negative_outputlen_rejected():
    with pytest.raises(ValueError):
        md5_hex(b"x", -1)
    with pytest.raises(ValueError):
        sha1_hex(b"x", -1)


def test_different_inputs_differ():
    assert md5(b"a") != md5(b"b")
    assert sha1(b"a") != sha1(b"b")