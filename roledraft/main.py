"""Server entry point: python -m roledraft.main"""

import logging
import os

import uvicorn

from roledraft.api import app

# Configure logging
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def run() -> None:
    host = os.environ.get("ROLEDRAFT_HOST", "0.0.0.0")
    port = int(os.environ.get("ROLEDRAFT_PORT", "3000"))
    logger.info("Server is running at %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
