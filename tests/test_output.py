import io

import pytest

from amoa.output import (
    DECIMAL,
    HEX_LOWER,
    HEX_UPPER,
    put_char,
    put_endl,
    put_nbr,
    put_nbr_base,
    put_str,
    to_base,
)


@pytest.mark.parametrize("n", [0, 1, 7, 10, 255, 65535, 2**40 + 3])
@pytest.mark.parametrize("base,radix", [("01", 2), ("01234567", 8), (DECIMAL, 10), (HEX_LOWER, 16)])
def test_to_base_round_trip(n, base, radix):
    assert int(to_base(n, base), radix) == n


def test_to_base_zero_is_first_digit():
    assert to_base(0, "01") == "0"


def test_to_base_upper_hex_matches_lower():
    assert to_base(48879, HEX_UPPER) == to_base(48879, HEX_LOWER).upper()


def test_to_base_custom_digits_use_only_base_chars():
    result = to_base(12345, "ab")
    assert set(result) <= {"a", "b"}
    assert int(result.replace("a", "0").replace("b", "1"), 2) == 12345


def test_to_base_rejects_negative():
    with pytest.raises(ValueError):
        to_base(-1, DECIMAL)


@pytest.mark.parametrize("base", ["", "0"])
def test_to_base_rejects_short_base(base):
    with pytest.raises(ValueError):
        to_base(5, base)


def test_to_base_rejects_non_int():
    with pytest.raises(TypeError):
        to_base("5", DECIMAL)


def test_put_char_writes_character():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_rejects_long_string():
    with pytest.raises(TypeError):
        put_char("xy", io.StringIO())


def test_put_str_and_endl():
    out = io.StringIO()
    put_str("hello", out)
    put_endl("world", out)
    assert out.getvalue() == "hello" + "world" + "\n"


def test_put_str_defaults_to_stdout(capsys):
    put_str("to stdout")
    assert capsys.readouterr().out == "to stdout"


def test_put_nbr_min_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 9, 10, -1, -42, 2147483647])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2147483648, io.StringIO())


def test_put_nbr_base_hex():
    out = io.StringIO()
    put_nbr_base(3735928559, HEX_UPPER, out)
    assert int(out.getvalue(), 16) == 3735928559
    assert out.getvalue().isupper()