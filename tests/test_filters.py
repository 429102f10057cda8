from dataclasses import replace

import pytest

from players_api.players.filters import matches
from players_api.players.player_dataclasses import Player, PlayerCriteria, Profession, Race


@pytest.fixture
def player():
    return Player(
        id=1,
        name="Eroy",
        title="Keeper of the gate",
        race=Race.ELF,
        profession=Profession.WARRIOR,
        birthday=1244497480383,
        banned=False,
        experience=150,
        level=1,
        until_next_level=150,
    )


def test_empty_criteria_matches_everything(player):
    assert matches(PlayerCriteria(), player)


@pytest.mark.parametrize(
    "criteria,expected",
    [
        (PlayerCriteria(name="roy"), True),
        (PlayerCriteria(name="ero"), False),
        (PlayerCriteria(title="of the"), True),
        (PlayerCriteria(title="Gate"), False),
        (PlayerCriteria(race=Race.ELF), True),
        (PlayerCriteria(race=Race.ORC), False),
        (PlayerCriteria(profession=Profession.WARRIOR), True),
        (PlayerCriteria(profession=Profession.DRUID), False),
        (PlayerCriteria(banned=False), True),
        (PlayerCriteria(banned=True), False),
    ],
)
def test_exact_and_substring_criteria(player, criteria, expected):
    assert matches(criteria, player) is expected


@pytest.mark.parametrize(
    "bounds,expected",
    [
        ({"min_experience": 100, "max_experience": 200}, True),
        ({"min_experience": 150, "max_experience": 150}, True),
        ({"min_experience": 151}, False),
        ({"max_experience": 149}, False),
        ({"max_experience": 150}, True),
        ({"min_level": 1, "max_level": 1}, True),
        ({"min_level": 2}, False),
        ({"max_level": 0}, False),
        ({"after": 1244497480383}, True),
        ({"before": 1244497480382}, False),
        ({"after": 1000000000000, "before": 1300000000000}, True),
    ],
)
def test_inclusive_ranges(player, bounds, expected):
    assert matches(PlayerCriteria(**bounds), player) is expected


def test_conjunction_requires_every_criterion(player):
    assert matches(PlayerCriteria(name="Eroy", race=Race.ELF, min_level=1), player)
    assert not matches(PlayerCriteria(name="Eroy", race=Race.ELF, min_level=2), player)


def test_banned_filter_selects_only_matching_flag(player):
    banned = replace(player, id=2, banned=True)
    players = [player, banned]

    assert [p.id for p in players if matches(PlayerCriteria(banned=True), p)] == [2]
    assert [p.id for p in players if matches(PlayerCriteria(), p)] == [1, 2]
