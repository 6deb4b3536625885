import pytest

from rustlings.lessons.primitives import (
    array_size_message,
    classify_char,
    describe_cat,
    greetings,
    nice_slice,
    second,
)


def test_greetings_morning():
    assert greetings(True, False) == ["Good morning!"]


def test_greetings_evening():
    assert greetings(False, True) == ["Good evening!"]


def test_greetings_none():
    assert greetings(False, False) == []


@pytest.mark.parametrize(
    "char, expected",
    [
        ("C", "Alphabetical!"),
        ("5", "Numerical!"),
        ("🦀", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_char(char, expected):
    assert classify_char(char) == expected


def test_classify_char_requires_one_character():
    with pytest.raises(ValueError):
        classify_char("ab")


def test_big_array():
    assert array_size_message(["Are we big enough?"] * 100) == "Wow, that's a big array!"


def test_small_array():
    assert (
        array_size_message(["Are we big enough?"] * 99)
        == "Meh, I eat arrays like that for breakfast."
    )


def test_slice_out_of_array():
    assert nice_slice([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_slice_too_short():
    with pytest.raises(IndexError):
        nice_slice([1, 2, 3])


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_describe_cat_whole_age():
    assert describe_cat(("Furry McFurson", 3.0)) == "Furry McFurson is 3 years old."


def test_indexing_tuple():
    assert second((1, 2, 3)) == 2