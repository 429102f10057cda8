import re

from aiohttp_apispec import docs, querystring_schema, request_schema, response_schema

from players_api.players.exceptions import BadRequestError
from players_api.players.schemes import (
    PlayerCountResponseSchema,
    PlayerCriteriaSchema,
    PlayerListQuerySchema,
    PlayerListResponseSchema,
    PlayerRequestSchema,
    PlayerResponseSchema,
    PlayerSchema,
)
from players_api.web.app import View
from players_api.web.schemes import ErrorResponseSchema, OkResponseSchema
from players_api.web.utils import json_response


class PlayerListView(View):
    @docs(tags=["players"], summary="List players", description="Filtered, sorted and paginated players")
    @querystring_schema(PlayerListQuerySchema)
    @response_schema(PlayerListResponseSchema, 200)
    async def get(self):
        criteria, paging = PlayerListQuerySchema().load(self.request.query)
        players = await self.store.players.list_players(
            criteria,
            page=paging["page_number"],
            page_size=paging["page_size"],
            order=paging["order"],
        )
        return json_response(data=PlayerSchema(many=True).dump(players))

    @docs(tags=["players"], summary="Create player", description="Create a player and derive its level")
    @request_schema(PlayerRequestSchema)
    @response_schema(PlayerResponseSchema, 200)
    @response_schema(ErrorResponseSchema, 400)
    async def post(self):
        data = PlayerRequestSchema().load(await self.request.json())
        player = await self.store.players.create_player(data)
        return json_response(data=PlayerSchema().dump(player))


class PlayerCountView(View):
    @docs(tags=["players"], summary="Count players", description="Number of players matching the filters")
    @querystring_schema(PlayerCriteriaSchema)
    @response_schema(PlayerCountResponseSchema, 200)
    async def get(self):
        criteria = PlayerCriteriaSchema().load(self.request.query)
        return json_response(data=await self.store.players.count_players(criteria))


class PlayerDetailView(View):
    @property
    def player_id(self) -> int:
        raw_id = self.request.match_info["id"]
        if re.fullmatch(r"-?[0-9]+", raw_id) is None:
            raise BadRequestError("Wrong id", data={"id": raw_id})
        return int(raw_id)

    @docs(tags=["players"], summary="Get player", description="Get player by id")
    @response_schema(PlayerResponseSchema, 200)
    @response_schema(ErrorResponseSchema, 404)
    async def get(self):
        player = await self.store.players.get_player(self.player_id)
        return json_response(data=PlayerSchema().dump(player))

    @docs(tags=["players"], summary="Update player", description="Overwrite the supplied fields only")
    @request_schema(PlayerRequestSchema)
    @response_schema(PlayerResponseSchema, 200)
    @response_schema(ErrorResponseSchema, 400)
    async def post(self):
        player_id = self.player_id
        data = PlayerRequestSchema().load(await self.request.json())
        player = await self.store.players.update_player(player_id, data)
        return json_response(data=PlayerSchema().dump(player))

    @docs(tags=["players"], summary="Delete player", description="Delete player by id")
    @response_schema(OkResponseSchema, 200)
    @response_schema(ErrorResponseSchema, 404)
    async def delete(self):
        await self.store.players.delete_player(self.player_id)
        return json_response()
