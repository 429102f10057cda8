from math import isqrt


def derive_level(experience: int) -> tuple[int, int]:
    """Return (level, until_next_level) for the given experience.

    level = floor((sqrt(2500 + 200 * experience) - 50) / 100), computed on the
    integer square root, which gives the same floor as the real-valued formula.
    """
    level = (isqrt(2500 + 200 * experience) - 50) // 100
    until_next_level = 50 * (level + 1) * (level + 2) - experience
    return level, until_next_level
