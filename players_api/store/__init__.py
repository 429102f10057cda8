from typing import TYPE_CHECKING

from players_api.store.database import Database

if TYPE_CHECKING:
    from players_api.web.app import Application


class Store:
    def __init__(self, app: "Application"):
        from players_api.store.players.accessor import PlayerAccessor

        self.players = PlayerAccessor(app)


def setup_store(app: "Application"):
    app.database = Database(app)
    app.on_startup.append(app.database.connect)
    app.on_cleanup.append(app.database.disconnect)
    app.store = Store(app)
