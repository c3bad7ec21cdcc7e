"""Hunt the Wumpus, as a two-button watch face."""

from .app import create_app
from .config import Config
from .face import WumpusFace
from .logging import configure_logging, get_logger

__all__ = ["main", "create_app", "Config", "WumpusFace"]


def main() -> None:
    """Entry point for the console game."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        seed=config.seed,
        log_level=config.log_level,
    )

    app = create_app(config)
    app.run()
