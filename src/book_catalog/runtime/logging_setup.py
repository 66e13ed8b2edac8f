import logging
import sys
from pathlib import Path

from loguru import logger

from book_catalog.runtime.config.config_data import ConfigData

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Redirect standard 'logging' records (SQLAlchemy's, mostly) to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def configure_logging(config: ConfigData) -> None:
    cfg = config.logging
    env = config.app.environment
    debug_tracebacks = env != "production"

    logger.remove()

    # Console: human-readable on stderr so it never mixes with command output
    logger.add(
        sys.stderr,
        level=cfg.level,
        format=PLAIN_FORMAT,
        colorize=True,
        backtrace=debug_tracebacks,
        diagnose=debug_tracebacks,
    )

    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        is_json = cfg.format == "json"
        logger.add(
            str(path),
            level=cfg.level,
            format="{message}" if is_json else PLAIN_FORMAT,
            serialize=is_json,
            colorize=False,
            rotation=f"{cfg.max_size_mb} MB",
            retention=cfg.backup_count,
            compression="zip",
            enqueue=True,
            backtrace=debug_tracebacks,
            diagnose=debug_tracebacks,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if config.database.echo else logging.WARNING
    )
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)

    logger.debug(
        "Logging configured (level={}, format={}, file={}, environment={})",
        cfg.level,
        cfg.format,
        cfg.file,
        env,
    )
