# bookgroups/__main__.py
import logging

import uvicorn

from .config import settings
from .main import app


logger = logging.getLogger("bookgroups")


def main() -> None:
    logger.info("Server listening on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
