from aiohttp.web_app import Application


def setup_routes(app: Application):
    from players_api.players.routes import setup_routes as setup_player_routes

    setup_player_routes(app)
