import pytest

from minish.printf import format_string, printf


def test_plain_text_is_unchanged():
    assert format_string("hello world") == "hello world"


@pytest.mark.parametrize("number", [0, 7, 42, -1, 123456, -98765, 2147483647])
def test_signed_round_trip(number):
    assert int(format_string("%d", number)) == number
    assert format_string("%i", number) == format_string("%d", number)


def test_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert int(format_string("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_wraps():
    assert int(format_string("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(number):
    assert int(format_string("%x", number), 16) == number
    assert format_string("%X", number) == format_string("%x", number).upper()


def test_hex_is_lower_case():
    assert format_string("%x", 255) == "ff"


def test_null_string_and_pointer():
    assert format_string("%s", None) == "(null)"
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_pointer_round_trip():
    text = format_string("%p", 0x1234ABCD)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234ABCD


def test_char_from_int_and_str():
    assert format_string("%c", ord("A")) == "A"
    assert format_string("%c%c", "o", "k") == "ok"


def test_percent_literal_consumes_no_argument():
    assert format_string("100%% %s", "done") == "100% done"


def test_unknown_conversion_is_dropped():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_stops():
    assert format_string("abc%") == "abc"


def test_mixed_conversions():
    assert format_string("%s=%d", "count", 3) == "count=3"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%s:%d\n", "pid", 12)
    out = capsys.readouterr().out
    assert out == "pid:12\n"
    assert count == len(out)