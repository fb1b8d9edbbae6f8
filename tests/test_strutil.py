import pytest

from poolkit.strutil import (
    CaseInsensitiveDict,
    FormData,
    FormFile,
    MultiMap,
    case_less,
    from_string,
    to_string,
)


def test_case_less():
    assert case_less("abc", "ABD") is True
    assert case_less("ABD", "abc") is False
    assert case_less("ABC", "abc") is False
    assert case_less("abc", "ABC") is False


def test_case_insensitive_lookup():
    d = CaseInsensitiveDict()
    d["Content-Type"] = "text/plain"
    assert d["content-type"] == "text/plain"
    assert "CONTENT-TYPE" in d
    assert len(d) == 1


def test_case_insensitive_update_keeps_first_spelling():
    d = CaseInsensitiveDict({"Content-Type": "a"})
    d["content-type"] = "b"
    assert list(d) == ["Content-Type"]
    assert d["Content-Type"] == "b"


def test_case_insensitive_order_and_delete():
    d = CaseInsensitiveDict(b=1, A=2, c=3)
    assert list(d) == ["A", "b", "c"]
    del d["a"]
    assert list(d) == ["b", "c"]
    with pytest.raises(KeyError):
        d["A"]


def test_to_string():
    assert to_string(True) == "1"
    assert to_string(False) == "0"
    assert to_string(42) == "42"
    assert to_string(1.5) == "1.5"
    assert to_string("text") == "text"


@pytest.mark.parametrize("value", [0, 123, -77])
def test_int_roundtrip(value):
    assert from_string(to_string(value), int) == value


@pytest.mark.parametrize("value", [1.5, -0.25, 1e10])
def test_float_roundtrip(value):
    assert from_string(to_string(value), float) == value


@pytest.mark.parametrize("value", [True, False])
def test_bool_roundtrip(value):
    assert from_string(to_string(value), bool) is value


def test_from_string_reads_leading_value():
    assert from_string("  42abc", int) == 42
    assert from_string("hello world", str) == "hello"


def test_from_string_failure_gives_zero():
    assert from_string("abc", int) == 0


def test_from_string_unknown_kind():
    with pytest.raises(TypeError):
        from_string("1", list)


def test_multimap_keeps_all_values():
    kvs = MultiMap()
    kvs.add("name", "hw")
    kvs.add("filename", "1.jpg")
    kvs.add("filename", "2.jpg")
    assert kvs.count("filename") == 2
    assert kvs.get_all("filename") == ["1.jpg", "2.jpg"]
    assert kvs.items() == [("filename", "1.jpg"), ("filename", "2.jpg"), ("name", "hw")]
    assert len(kvs) == 3
    assert kvs.get_all("missing") == []


def test_form_data_from_value():
    part = FormData.from_value(3)
    assert part.content == to_string(3)
    assert part.filename == ""


def test_form_file():
    part = FormFile("user.jpg")
    assert part.filename == "user.jpg"
    assert part.content == ""
    assert isinstance(part, FormData)