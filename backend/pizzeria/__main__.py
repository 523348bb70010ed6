"""Run the API with uvicorn: ``python -m pizzeria``.

A single worker only: the entity store lives in process memory and is not
shared between processes.
"""

from uvicorn import Config, Server

from pizzeria.config import Settings, get_settings
from pizzeria.main import create_app


def build_server_config(settings: Settings) -> Config:
    """uvicorn config around a fresh app built from the same settings."""
    return Config(
        app=create_app(settings),
        host=settings.host,
        port=settings.port,
        workers=1,
        reload=False,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    Server(build_server_config(get_settings())).run()


if __name__ == "__main__":
    main()
