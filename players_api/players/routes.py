from typing import TYPE_CHECKING

from players_api.players.views import PlayerCountView, PlayerDetailView, PlayerListView

if TYPE_CHECKING:
    from players_api.web.app import Application


def setup_routes(app: "Application"):
    app.router.add_view("/rest/players", PlayerListView)
    # registered before the {id} route so "count" is not taken for an id
    app.router.add_view("/rest/players/count", PlayerCountView)
    app.router.add_view("/rest/players/{id}", PlayerDetailView)
