from typing import Optional

from aiohttp.web import (
    Application as AiohttpApplication,
    View as AiohttpView,
)
from aiohttp_apispec import setup_aiohttp_apispec

from players_api.store import Database, Store, setup_store
from players_api.web.config import Config, setup_config
from players_api.web.logger import setup_logging
from players_api.web.mw import setup_middlewares
from players_api.web.routes import setup_routes


class Application(AiohttpApplication):
    config: Optional[Config] = None
    store: Optional[Store] = None
    database: Optional[Database] = None


class View(AiohttpView):
    @property
    def store(self) -> Store:
        return self.request.app.store


def setup_app(config_path: str) -> Application:
    app = Application()
    setup_config(app, config_path)
    setup_logging(app)
    setup_routes(app)
    setup_aiohttp_apispec(app, title="Player registry", url="/docs/json", swagger_path="/docs")
    setup_middlewares(app)
    setup_store(app)
    return app
