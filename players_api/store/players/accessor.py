from typing import Any, Mapping

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from players_api.base import BaseAccessor
from players_api.players.exceptions import BadRequestError, NotFoundError
from players_api.players.filters import ORDER_COLUMNS, where_clause
from players_api.players.level import derive_level
from players_api.players.models import PlayerModel
from players_api.players.player_dataclasses import Player, PlayerCriteria, PlayerOrder
from players_api.players.validation import (
    is_creatable,
    is_valid_birthday,
    is_valid_experience,
    is_valid_name,
    is_valid_title,
)

MAX_PLAYER_ID = 2 ** 63 - 1

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3


def _set_experience(model: PlayerModel, experience: int) -> None:
    model.experience = experience
    model.level, model.until_next_level = derive_level(experience)


class PlayerAccessor(BaseAccessor):
    async def create_player(self, candidate: Mapping[str, Any]) -> Player:
        if not is_creatable(candidate):
            raise BadRequestError("Some fields are filled in incorrectly or empty")

        model = PlayerModel(
            name=candidate["name"],
            title=candidate["title"],
            race=candidate["race"],
            profession=candidate["profession"],
            birthday=candidate["birthday"],
            banned=candidate.get("banned") or False,
        )
        _set_experience(model, candidate["experience"])

        async with self.database.session() as session:
            session.add(model)
            await session.commit()

        logger.info("Player {} created with id {}", model.name, model.id)
        return model.to_dc()

    @staticmethod
    def _check_id(player_id: int) -> None:
        if player_id <= 0 or player_id > MAX_PLAYER_ID:
            raise BadRequestError("Wrong id", data={"id": player_id})

    async def _get_model(self, session: AsyncSession, player_id: int) -> PlayerModel:
        self._check_id(player_id)
        model = await session.get(PlayerModel, player_id)
        if model is None:
            raise NotFoundError("Player not found", data={"id": player_id})
        return model

    async def get_player(self, player_id: int) -> Player:
        async with self.database.session() as session:
            model = await self._get_model(session, player_id)

        return model.to_dc()

    async def update_player(self, player_id: int, changes: Mapping[str, Any]) -> Player:
        """Apply the supplied fields of ``changes`` to an existing player.

        Fields are checked one at a time in a fixed order and assigned as soon
        as they pass. A rejected field aborts the call before commit, so the
        stored row is left as it was.
        """
        async with self.database.session() as session:
            model = await self._get_model(session, player_id)

            if changes.get("name") is not None:
                if not is_valid_name(changes["name"]):
                    raise BadRequestError("Wrong name")
                model.name = changes["name"]
            if changes.get("title") is not None:
                if not is_valid_title(changes["title"]):
                    raise BadRequestError("Wrong title")
                model.title = changes["title"]
            if changes.get("race") is not None:
                model.race = changes["race"]
            if changes.get("profession") is not None:
                model.profession = changes["profession"]
            if changes.get("banned") is not None:
                model.banned = changes["banned"]
            if changes.get("birthday") is not None:
                if not is_valid_birthday(changes["birthday"]):
                    raise BadRequestError("Wrong date of birth")
                model.birthday = changes["birthday"]
            if changes.get("experience") is not None:
                if not is_valid_experience(changes["experience"]):
                    raise BadRequestError("Unacceptable experience value")
                _set_experience(model, changes["experience"])

            await session.commit()

        logger.info("Player {} updated", player_id)
        return model.to_dc()

    async def delete_player(self, player_id: int) -> None:
        async with self.database.session() as session:
            model = await self._get_model(session, player_id)
            await session.delete(model)
            await session.commit()

        logger.info("Player {} deleted", player_id)

    async def list_players(
            self,
            criteria: PlayerCriteria,
            page: int = DEFAULT_PAGE_NUMBER,
            page_size: int = DEFAULT_PAGE_SIZE,
            order: PlayerOrder = PlayerOrder.ID,
    ) -> list[Player]:
        select_query = (
            select(PlayerModel)
                .where(where_clause(criteria))
                .order_by(ORDER_COLUMNS[order], PlayerModel.id)
                .offset(page * page_size)
                .limit(page_size)
        )
        async with self.database.session() as session:
            res = await session.execute(select_query)

        return [model.to_dc() for model in res.scalars()]

    async def count_players(self, criteria: PlayerCriteria) -> int:
        select_query = select(func.count()).select_from(PlayerModel).where(where_clause(criteria))
        async with self.database.session() as session:
            res = await session.execute(select_query)

        return res.scalar_one()
