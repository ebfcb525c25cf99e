"""
Logging Configuration for the Squad Simulation Core

Sets up application logging with:
- Rotating file handlers (prevents unbounded log growth)
- Console output with colored level names
- Module-specific loggers for player and team simulation

Usage Example:
    from logging_config import setup_logging, get_logger

    setup_logging(level="INFO", log_dir="logs", enable_console=True, enable_file=False)

    logger = get_logger(__name__)
    logger.info("Season tick started")

Log Files Created:
- logs/squad_sim.log: Main application log (INFO+)
- logs/squad_sim_debug.log: Debug log (DEBUG+)
- logs/squad_sim_error.log: Error log (ERROR+)

Library modules only call logging.getLogger(__name__); handlers are
configured here, once, by the embedding application.
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional


# Log format templates
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "squad_sim"


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output.

    Adds ANSI color codes to log levels for better readability.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        """Add color to levelname without leaking it into other handlers"""
        original = record.levelname
        if original in self.COLORS:
            record.levelname = f"{self.COLORS[original]}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _rotating_handler(path: str, level: int, fmt: str, max_bytes: int, backup_count: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Setup application-wide logging configuration.

    This function should be called once at application startup.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        enable_console: Whether to log to console
        enable_file: Whether to log to file
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
        format_style: "detailed" or "simple" format
    """
    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear any existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    log_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        root_logger.addHandler(_rotating_handler(
            os.path.join(log_dir, f"{LOG_FILE_PREFIX}.log"),
            logging.INFO, log_format, max_bytes, backup_count
        ))
        root_logger.addHandler(_rotating_handler(
            os.path.join(log_dir, f"{LOG_FILE_PREFIX}_debug.log"),
            logging.DEBUG, DETAILED_FORMAT, max_bytes, backup_count
        ))
        root_logger.addHandler(_rotating_handler(
            os.path.join(log_dir, f"{LOG_FILE_PREFIX}_error.log"),
            logging.ERROR, DETAILED_FORMAT, max_bytes, backup_count
        ))

    root_logger.info(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR"
) -> None:
    """
    Log an exception with full traceback and context.

    Args:
        logger: Logger instance
        exception: Exception to log
        context: Additional context dict (team_id, player_id, etc.)
        level: Log level (default: ERROR)

    Example:
        >>> try:
        ...     team.set_lineup(lineup)
        ... except DomainError as e:
        ...     log_exception(logger, e, context={"team_id": team.team_id})
    """
    log_level = getattr(logging, level.upper())

    context_str = ""
    if context:
        context_items = [f"{k}={v}" for k, v in context.items()]
        context_str = f" [{', '.join(context_items)}]"

    logger.log(
        log_level,
        f"Exception occurred{context_str}: {type(exception).__name__}: {str(exception)}",
        exc_info=True
    )


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Configure logging for a specific module.

    Args:
        module_name: Module name (e.g., "player_management.development_manager")
        level: Log level for this module (None = inherit from root)
        propagate: Whether to propagate to parent loggers

    Returns:
        Configured logger
    """
    logger = logging.getLogger(module_name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    logger.propagate = propagate

    return logger


class LogContext:
    """
    Context manager for temporary log level changes.

    Example:
        >>> logger = get_logger("player_management.development_manager")
        >>> with LogContext(logger, "DEBUG"):
        ...     manager.process_training(player, TrainingType.TECHNICAL, 0.5)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = getattr(logging, level.upper())
        self.original_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.original_level)


# Module-specific logger configurations

def setup_player_logging(level: str = "INFO") -> None:
    """
    Configure logging for the player simulation engines.

    Training and fitness ticks log at DEBUG, so DEBUG here is very verbose.
    """
    configure_module_logger("player_management", level=level)
    configure_module_logger("player_management.fitness_manager", level=level)
    configure_module_logger("player_management.development_manager", level=level)


def setup_team_logging(level: str = "INFO") -> None:
    """Configure logging for roster, lineup, and finance operations."""
    configure_module_logger("team_management", level=level)
    configure_module_logger("team_management.team", level=level)
    configure_module_logger("team_management.squad_manager", level=level)
    configure_module_logger("team_management.finances", level=level)


# Quick setup presets

def setup_production_logging(log_dir: str = "logs") -> None:
    """
    Setup logging for production environment.

    Configuration:
    - Level: INFO
    - Console: No
    - File: Yes
    """
    setup_logging(
        level="INFO",
        log_dir=log_dir,
        enable_console=False,
        enable_file=True,
        format_style="simple"
    )


def setup_development_logging(log_dir: str = "logs") -> None:
    """
    Setup logging for development environment.

    Configuration:
    - Level: DEBUG
    - Console: Yes (colored)
    - File: Yes
    """
    setup_logging(
        level="DEBUG",
        log_dir=log_dir,
        enable_console=True,
        enable_file=True,
        format_style="detailed"
    )


def setup_testing_logging() -> None:
    """
    Setup logging for testing environment.

    Configuration:
    - Level: WARNING
    - Console: Yes
    - File: No
    """
    setup_logging(
        level="WARNING",
        log_dir="logs",
        enable_console=True,
        enable_file=False,
        format_style="simple"
    )
