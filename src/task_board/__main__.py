"""TaskBoard main application."""

import logging
import sys

import uvicorn

from task_board.config import HOST
from task_board.factory import create_app, get_config

# Create app instance for uvicorn
app = create_app()


def main() -> int:
    """Run the application."""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    config = get_config()
    logging.info(f"[Main] Task board listening on http://localhost:{config.port}")

    # Run server with app from module level
    uvicorn.run(
        app,
        host=HOST,
        port=config.port,
        log_level="info",
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
