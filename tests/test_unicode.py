import pytest

from xcorelib.unicode import (
    from_utf16,
    length_from_utf16,
    length_to_utf16,
    to_utf16,
)

MAX_BUFFER_LENGTH = 64

CONVERSION_CASES = [
    (
        b"String",
        [0x0053, 0x0074, 0x0072, 0x0069, 0x006E, 0x0067],
    ),
    (
        b"\xD0\xA1\xD1\x82\xD1\x80\xD0\xBE\xD0\xBA\xD0\xB0",
        [0x0421, 0x0442, 0x0440, 0x043E, 0x043A, 0x0430],
    ),
    (
        b"\xE4\xBF\xA1\xE6\x81\xAF\xE5\x8C\x96\xE7\x9A\x84"
        b"\xE7\xA4\xBE\xE4\xBC\x9A\xE5\xBD\xB1\xE5\x93\x8D",
        [0x4FE1, 0x606F, 0x5316, 0x7684, 0x793E, 0x4F1A, 0x5F71, 0x54CD],
    ),
    (
        b"\xF0\x90\x8C\x80\xF0\x90\x8C\x81\xF0\x90\x8C\x82"
        b"\xF0\x90\x8C\x83\xF0\x90\x8C\x84\xF0\x90\x8C\x85",
        [
            0xD800, 0xDF00, 0xD800, 0xDF01, 0xD800, 0xDF02,
            0xD800, 0xDF03, 0xD800, 0xDF04, 0xD800, 0xDF05,
        ],
    ),
]


@pytest.mark.parametrize("text, sample", CONVERSION_CASES)
def test_utf8_to_utf16(text, sample):
    assert to_utf16(text, MAX_BUFFER_LENGTH) == sample


@pytest.mark.parametrize("text, sample", CONVERSION_CASES)
def test_length_to_utf16(text, sample):
    assert length_to_utf16(text) == len(sample)


@pytest.mark.parametrize("text, sample", CONVERSION_CASES)
def test_utf16_to_utf8(text, sample):
    front = to_utf16(text, MAX_BUFFER_LENGTH)
    assert from_utf16(front, MAX_BUFFER_LENGTH) == text


@pytest.mark.parametrize("text, sample", CONVERSION_CASES)
def test_length_from_utf16(text, sample):
    front = to_utf16(text, MAX_BUFFER_LENGTH)
    assert length_from_utf16(front) == len(text)


def test_small_output_buffer():
    source = [0x0442, 0x0435, 0x0441, 0x0442, 0x0000]
    result = from_utf16(source, 8)
    assert result == b"\xD1\x82\xD0\xB5\xD1\x81"


def test_dropped_surrogate_pairs():
    source = [0xD845, 0xDC84, 0xDF19, 0xD846, 0xD846, 0xDFA6, 0xDE4F, 0xD83D,
              0x0000]
    expected = b"\xF0\xA1\x92\x84\xF0\xA1\xAE\xA6"
    assert length_from_utf16(source) == len(expected)
    assert from_utf16(source, MAX_BUFFER_LENGTH) == expected


def test_utf16_stops_at_terminator():
    assert from_utf16([0x41, 0x0000, 0x42]) == b"A"
    assert length_from_utf16([0x41, 0x0000, 0x42]) == 1


def test_utf8_stops_at_terminator():
    assert to_utf16(b"A\x00B") == [0x41]
    assert length_to_utf16(b"A\x00B") == 1


def test_to_utf16_limit_counts_terminator():
    assert to_utf16(b"String", 4) == [0x0053, 0x0074, 0x0072]


def test_from_utf16_limit_counts_terminator():
    assert from_utf16([0x0053, 0x0074, 0x0072, 0x0069], 3) == b"St"


def test_unlimited_round_trip_of_text():
    text = "Mixed \u0421\u0442 \u4FE1 \U00010300 end".encode("utf-8")
    units = to_utf16(text)
    assert length_to_utf16(text) == len(units)
    assert from_utf16(units) == text


def test_str_source_accepted():
    assert to_utf16("String") == to_utf16(b"String")


@pytest.mark.parametrize("max_length", [0, -1])
def test_invalid_limit_raises(max_length):
    with pytest.raises(ValueError):
        from_utf16([0x41], max_length)
    with pytest.raises(ValueError):
        to_utf16(b"A", max_length)