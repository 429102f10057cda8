from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from players_api.store.database import Database
    from players_api.web.app import Application


class BaseAccessor:
    def __init__(self, app: "Application", *args, **kwargs):
        self.app = app
        app.on_startup.append(self.connect)
        app.on_cleanup.append(self.disconnect)

    @property
    def database(self) -> "Database":
        return self.app.database

    async def connect(self, app: "Application"):
        pass

    async def disconnect(self, app: "Application"):
        pass
