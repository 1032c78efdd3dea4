import pytest

from hoconfmt.normalize import format_source, leading_indent


@pytest.mark.parametrize(
    "src, expected",
    [
        (b"", b""),
        (b"key = 1\n", b"key = 1\n"),
        (b"  key = 1\n", b"\tkey = 1\n"),
        (b"\t\tkey = 1\n", b"\t\tkey = 1\n"),
        (b" \tkey = 1\n", b"\tkey = 1\n"),
        (b"\t  \tkey = 1\n", b"\t\tkey = 1\n"),
        (b"\n\n  key = 1\n", b"\n\n\tkey = 1\n"),
    ],
)
def test_format_source(src, expected):
    assert format_source(src) == expected


def test_leading_blank_lines_are_copied_verbatim():
    src = b" \t\n  \r\n    a = 1\n"
    out = format_source(src)
    assert out.startswith(b" \t\n  \r\n")
    assert out == b" \t\n  \r\n\ta = 1\n"


def test_body_bytes_pass_through():
    src = b"  a {\r\n      b = 2   \r\n}\r\n"
    assert format_source(src) == b"\ta {\r\n      b = 2   \r\n}\r\n"


def test_all_whitespace_input():
    assert format_source(b"  \n  ") == b"  \n\t"
    assert format_source(b"\n\n") == b"\n\n"


@pytest.mark.parametrize(
    "src",
    [b"", b"  x", b"\t\t x", b" \n \t\n  y = 2\n", b"\r\n\r\n   z", b"   ", b" \t \n\t \n"],
)
def test_idempotent(src):
    once = format_source(src)
    assert format_source(once) == once


def test_leading_indent():
    assert leading_indent(b"") == (0, 0, 0)
    assert leading_indent(b"\n\n  a") == (2, 4, 1)
    assert leading_indent(b"\t\ta") == (0, 2, 2)
    assert leading_indent(b"a") == (0, 0, 0)
