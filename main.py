import logging
import sys

import uvicorn

from travelbot.api.routes import app
from travelbot.settings.config import settings
from travelbot.settings.logging import LOG_FORMAT, setup_logger


logging.basicConfig(
    level=logging.INFO,
    stream=sys.stdout,
    format=LOG_FORMAT,
    force=True  # This forces the basic configuration, overriding any previous settings
)
logger = setup_logger("main")

if settings.validate():
    logger.info("Settings validated successfully")

if __name__ == "__main__":
    logger.info(f"Starting server at {settings.API_HOST}:{settings.API_PORT}")
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
