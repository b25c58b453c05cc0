"""Entry point for the TennisBot order API.

Starts the FastAPI application with uvicorn.  Intended to be executed
from the project root, for example in Docker where only a single Python
file is specified as the command.

Host, port, database path and admin token are read from the
environment (see ``tennisbot_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from tennisbot_api.app.core.config import settings
from tennisbot_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
