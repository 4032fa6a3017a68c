import pytest

from easyfunc.chars import ascii_char, first_code


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (72, "H"),
        (101, "e"),
        (108, "l"),
        (111, "o"),
        (10, "\n"),
        (0, ""),
        (97, "a"),
        (9, "\t"),
        (127, "\x7f"),
        (256, ""),
        (-159, "a"),
        (128, ""),
    ],
)
def test_ascii_char(code, expected):
    assert ascii_char(code) == expected


def test_ascii_char_wraps_above_256():
    assert ascii_char(321) == "A"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a", 97),
        ("z", 122),
        ("0", 48),
        ("9", 57),
        ("!", 33),
        ("*", 42),
        ("@", 64),
        ("\n", 10),
        ("\x0A", 10),
        ("\xFF", 255),
        ("\x7F", 127),
        ("Hello", 72),
        ("H", 72),
        (" ", 32),
        ("", 0),
    ],
)
def test_first_code(text, expected):
    assert first_code(text) == expected


@pytest.mark.parametrize("code", [32, 65, 97, 126])
def test_round_trip(code):
    assert first_code(ascii_char(code)) == code