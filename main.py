import os

from aiohttp.web import run_app

from players_api.web.app import setup_app


def main():
    run_app(
        setup_app(
            config_path=os.path.join(
                os.path.dirname(os.path.realpath(__file__)), "etc", "config.yaml"
            )
        )
    )


if __name__ == "__main__":
    main()
