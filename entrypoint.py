"""Main application entrypoint.

Configures logging and creates the FastAPI app for ``uvicorn entrypoint:app``;
run directly, it starts the server.
"""

from clockcheck.__main__ import main
from clockcheck.core.app import create_app
from clockcheck.core.config import settings
from clockcheck.core.logging_config import setup_logging

# Configure logging
logger = setup_logging(settings.log_level, settings.log_file).bind(module=__name__)

# Create FastAPI application
app = create_app(settings)

if __name__ == "__main__":
    main()
