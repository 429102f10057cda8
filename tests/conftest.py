import pytest
import yaml

from players_api.players.player_dataclasses import Profession, Race
from players_api.web.app import setup_app


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({
        "database": {"url": f"sqlite+aiosqlite:///{tmp_path / 'players.db'}"},
        "logging": {"level": "DEBUG"},
    }))
    return str(path)


@pytest.fixture
def server(config_path):
    return setup_app(config_path)


@pytest.fixture
async def cli(aiohttp_client, server):
    return await aiohttp_client(server)


@pytest.fixture
def store(cli):
    return cli.server.app.store


@pytest.fixture
def player_payload():
    return {
        "name": "Ниус",
        "title": "Приходящий Без Шума",
        "race": "HOBBIT",
        "profession": "ROGUE",
        "birthday": 1244497480383,
        "experience": 33970,
    }


@pytest.fixture
def candidate():
    return {
        "name": "Eroy",
        "title": "Keeper of the gate",
        "race": Race.ELF,
        "profession": Profession.WARRIOR,
        "birthday": 1244497480383,
        "experience": 1,
    }
