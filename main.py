"""Main entry point for the WorldView research API."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from worldview.api import create_fastapi_app
from worldview.config import load_settings
from worldview.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent
    load_dotenv(project_root / ".env")
    setup_logging()

    settings = load_settings()
    app = create_fastapi_app()

    logger.info(
        "WorldView Parallel Agent System on http://%s:%s/api/research?state=California&country=USA",
        settings.api_host,
        settings.api_port,
    )

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
