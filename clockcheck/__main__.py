"""Server runner: ``python -m clockcheck`` or the ``clockcheck`` script."""

import uvicorn

from clockcheck.core.app import create_app
from clockcheck.core.config import AppSettings, settings
from clockcheck.core.logging_config import setup_logging


def serve(app_settings: AppSettings | None = None) -> None:
    """Apply logging settings, bind the listener and block until uvicorn shuts down."""
    app_settings = app_settings or settings
    logger = setup_logging(app_settings.log_level, app_settings.log_file).bind(module=__name__)

    logger.info(f"Starting server on {app_settings.host}:{app_settings.port}")
    uvicorn.run(
        create_app(app_settings),
        host=app_settings.host,
        port=app_settings.port,
        log_level="debug" if app_settings.debug else "info",
    )


def main() -> None:
    serve()


if __name__ == "__main__":
    main()
