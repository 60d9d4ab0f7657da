import asyncio
import logging
import hypercorn.asyncio
from hypercorn.config import Config
from mon_ai.core.config import settings
from mon_ai.main import app


def run() -> None:
    config = Config()
    config.bind = [f"{settings.HOST}:{settings.PORT}"]
    config.alpn_protocols = ["h2", "http/1.1"]

    logging.info(f"Mon A.I server running on port {settings.PORT}")
    asyncio.run(hypercorn.asyncio.serve(app, config))


if __name__ == '__main__':
    run()
