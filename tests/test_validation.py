import pytest

from players_api.players.validation import (
    MAX_BIRTHDAY,
    MIN_BIRTHDAY,
    is_creatable,
    is_valid_birthday,
    is_valid_experience,
    is_valid_name,
    is_valid_title,
)


@pytest.mark.parametrize("name,valid", [("a" * 12, True), ("a" * 13, False), ("", False), (None, False)])
def test_name(name, valid):
    assert is_valid_name(name) is valid


@pytest.mark.parametrize("title,valid", [("", True), ("t" * 30, True), ("t" * 31, False), (None, False)])
def test_title(title, valid):
    assert is_valid_title(title) is valid


@pytest.mark.parametrize(
    "experience,valid",
    [(0, False), (1, True), (10_000_000, True), (10_000_001, False), (-1, False), (None, False), (True, False)],
)
def test_experience(experience, valid):
    assert is_valid_experience(experience) is valid


@pytest.mark.parametrize(
    "birthday,valid",
    [
        (MIN_BIRTHDAY, True),
        (MIN_BIRTHDAY - 1, False),
        (MAX_BIRTHDAY, True),
        (MAX_BIRTHDAY + 1, False),
        (None, False),
    ],
)
def test_birthday(birthday, valid):
    assert is_valid_birthday(birthday) is valid


def test_creatable(candidate):
    assert is_creatable(candidate)


@pytest.mark.parametrize("field", ["name", "title", "race", "profession", "birthday", "experience"])
def test_not_creatable_without_required_field(candidate, field):
    del candidate[field]
    assert not is_creatable(candidate)


def test_banned_is_optional(candidate):
    candidate["banned"] = True
    assert is_creatable(candidate)


def test_does_not_mutate_candidate(candidate):
    before = dict(candidate)
    is_creatable(candidate)
    assert candidate == before
