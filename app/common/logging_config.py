"""
Logging Configuration for Flask App
====================================

Configure logging to both console and file with rotation.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logging(app):
    """
    Setup logging for Flask application.

    Logs will be written to:
    - Console (stderr) - warnings and above
    - File (<LOG_DIR>/app.log) - when LOG_TO_FILE is enabled

    File rotation is controlled by LOG_MAX_BYTES and LOG_BACKUP_COUNT.
    """
    log_level = logging.DEBUG if app.debug else logging.INFO
    log_level_console = logging.WARNING

    detailed_formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        '%(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when the factory runs twice
    root_logger.handlers.clear()

    if app.config.get("LOG_TO_FILE", True):
        log_dir = Path(app.config.get("LOG_DIR", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)

        # delay=True defers opening the file until the first write
        file_handler = RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=app.config.get("LOG_MAX_BYTES", 10 * 1024 * 1024),
            backupCount=app.config.get("LOG_BACKUP_COUNT", 5),
            encoding='utf-8',
            delay=True
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level_console)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    # Flask app logger uses the root logger's handlers
    app.logger.setLevel(log_level)
    app.logger.propagate = True

    app.logger.info(f"Task Manager API started - file logging: {app.config.get('LOG_TO_FILE', True)}")
    app.logger.info(f"Log level: {logging.getLevelName(log_level)}")

    return app
