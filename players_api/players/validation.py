from typing import Any, Mapping

MAX_NAME_LENGTH = 12
MAX_TITLE_LENGTH = 30
MAX_EXPERIENCE = 10_000_000
MIN_BIRTHDAY = 946674000482
MAX_BIRTHDAY = 32535205199494


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_name(name: Any) -> bool:
    return isinstance(name, str) and 0 < len(name) <= MAX_NAME_LENGTH


def is_valid_title(title: Any) -> bool:
    return isinstance(title, str) and len(title) <= MAX_TITLE_LENGTH


def is_valid_experience(experience: Any) -> bool:
    return _is_int(experience) and 0 < experience <= MAX_EXPERIENCE


def is_valid_birthday(birthday: Any) -> bool:
    return _is_int(birthday) and MIN_BIRTHDAY <= birthday <= MAX_BIRTHDAY


def is_creatable(candidate: Mapping[str, Any]) -> bool:
    return (
        candidate.get("race") is not None
        and candidate.get("profession") is not None
        and is_valid_name(candidate.get("name"))
        and is_valid_title(candidate.get("title"))
        and is_valid_experience(candidate.get("experience"))
        and is_valid_birthday(candidate.get("birthday"))
    )
