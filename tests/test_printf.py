import io

import pytest

from amoa.printf import format_printf, print_lines, printf


def test_plain_text_unchanged():
    assert format_printf("hello world") == "hello world"


def test_percent_escape():
    assert format_printf("100%%") == "100%"


def test_string_conversion():
    assert format_printf("[%s]", "abc") == "[abc]"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_null_pointer():
    assert format_printf("%p", None) == "(nil)"
    assert format_printf("%p", 0) == "(nil)"


def test_pointer_is_hex_with_prefix():
    result = format_printf("%p", 4096)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 4096


@pytest.mark.parametrize("value", ["A", 65])
def test_char_conversion(value):
    assert format_printf("%c", value) == "A"


@pytest.mark.parametrize("conversion", ["d", "i"])
@pytest.mark.parametrize("n", [0, 7, -13, 2147483647, -2147483648])
def test_signed_round_trip(conversion, n):
    assert int(format_printf("%" + conversion, n)) == n


def test_signed_wraps_to_32_bits():
    assert int(format_printf("%d", 2**31)) == -(2**31)


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_hex_conversions():
    lower = format_printf("%x", 48879)
    upper = format_printf("%X", 48879)
    assert int(lower, 16) == 48879
    assert upper == lower.upper()


def test_unknown_conversion_is_skipped():
    assert format_printf("a%qb") == "ab"


def test_trailing_percent_produces_nothing():
    assert format_printf("abc%") == "abc"


def test_extra_arguments_are_ignored():
    assert format_printf("%s", "one", "two") == "one"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "x")


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%d", "key", 12, stream=out)
    assert count == len(out.getvalue())
    assert out.getvalue().startswith("key=")
    assert int(out.getvalue()[4:]) == 12


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "shown")
    assert capsys.readouterr().out == "shown"
    assert count == len("shown")


def test_print_lines():
    out = io.StringIO()
    print_lines(["first", "second", "100%"], out)
    assert out.getvalue().splitlines() == ["first", "second", "100%"]
    assert out.getvalue().endswith("\n")


def test_print_lines_empty():
    out = io.StringIO()
    print_lines([], out)
    assert out.getvalue() == ""