import pytest

from quire.core.utils import slugify, truncate_words


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello World", "hello-world"),
        ("Café au lait", "cafe-au-lait"),
        ("  --  ", "untitled"),
        ("a" * 80, "a" * 60),
    ],
)
def test_slugify(text: str, expected: str):
    assert slugify(text) == expected


def test_truncate_words_keeps_short_text():
    assert truncate_words("one two", count=5) == "one two"


def test_truncate_words_appends_suffix():
    assert truncate_words("one two three", count=2, suffix=" [more]") == "one two [more]"
