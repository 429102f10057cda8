"""Criteria evaluation for player listing and counting.

The same PlayerCriteria is evaluated two ways: ``matches`` checks a single
in-memory Player, ``where_clause`` renders a SQLAlchemy condition so the
database filters without loading the whole table. Each supplied criterion is
ANDed in; a missing one adds no constraint.
"""
from typing import Optional

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from players_api.players.models import PlayerModel
from players_api.players.player_dataclasses import Player, PlayerCriteria, PlayerOrder

ORDER_COLUMNS = {
    PlayerOrder.ID: PlayerModel.id,
    PlayerOrder.NAME: PlayerModel.name,
    PlayerOrder.EXPERIENCE: PlayerModel.experience,
    PlayerOrder.BIRTHDAY: PlayerModel.birthday,
    PlayerOrder.LEVEL: PlayerModel.level,
}


def _in_range(value: int, lower: Optional[int], upper: Optional[int]) -> bool:
    return (lower is None or value >= lower) and (upper is None or value <= upper)


def matches(criteria: PlayerCriteria, player: Player) -> bool:
    return (
        (criteria.name is None or criteria.name in player.name)
        and (criteria.title is None or criteria.title in player.title)
        and (criteria.race is None or player.race == criteria.race)
        and (criteria.profession is None or player.profession == criteria.profession)
        and (criteria.banned is None or player.banned == criteria.banned)
        and _in_range(player.birthday, criteria.after, criteria.before)
        and _in_range(player.experience, criteria.min_experience, criteria.max_experience)
        and _in_range(player.level, criteria.min_level, criteria.max_level)
    )


def _range_clauses(column, lower: Optional[int], upper: Optional[int]) -> list[ColumnElement]:
    if lower is not None and upper is not None:
        return [column.between(lower, upper)]
    if lower is not None:
        return [column >= lower]
    if upper is not None:
        return [column <= upper]
    return []


def where_clause(criteria: PlayerCriteria) -> ColumnElement:
    clauses = []
    if criteria.name is not None:
        clauses.append(PlayerModel.name.contains(criteria.name, autoescape=True))
    if criteria.title is not None:
        clauses.append(PlayerModel.title.contains(criteria.title, autoescape=True))
    if criteria.race is not None:
        clauses.append(PlayerModel.race == criteria.race)
    if criteria.profession is not None:
        clauses.append(PlayerModel.profession == criteria.profession)
    if criteria.banned is not None:
        clauses.append(PlayerModel.banned.is_(criteria.banned))
    clauses.extend(_range_clauses(PlayerModel.birthday, criteria.after, criteria.before))
    clauses.extend(
        _range_clauses(PlayerModel.experience, criteria.min_experience, criteria.max_experience)
    )
    clauses.extend(_range_clauses(PlayerModel.level, criteria.min_level, criteria.max_level))

    return and_(true(), *clauses)
