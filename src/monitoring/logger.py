"""Centralized logging configuration using Loguru."""

import sys
from typing import Any

from loguru import logger

from src.core.config import settings


def setup_logging() -> None:
    """Configure Loguru logging for the application."""
    # Remove default handler
    logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message} | "
        "{extra}"
    )

    logger.add(
        sys.stderr,
        format=console_format,
        level=settings.log_level,
        colorize=True,
        backtrace=True,
        diagnose=settings.debug,
    )

    if settings.log_to_file:
        logs_dir = settings.logs_dir
        logger.add(
            logs_dir / "webfacade_{time:YYYY-MM-DD}.log",
            format=file_format,
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            compression="gz",
            backtrace=True,
            diagnose=True,
        )
        logger.add(
            logs_dir / "errors_{time:YYYY-MM-DD}.log",
            format=file_format,
            level="ERROR",
            rotation="00:00",
            retention="30 days",
            compression="gz",
            backtrace=True,
            diagnose=True,
        )

    logger.info(
        f"Logging initialized | level={settings.log_level} | env={settings.app_env.value}"
    )


def get_logger(name: str) -> Any:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logger.bind(name=name)


def log_action(
    action: str,
    locator: str | None = None,
    success: bool = True,
    duration: float | None = None,
    **extra: Any,
) -> None:
    """Log a single browser action.

    Args:
        action: Facade action name
        locator: Locator string involved, if any
        success: Whether the action completed
        duration: Action duration in seconds
        **extra: Additional context
    """
    status = "SUCCESS" if success else "FAILED"
    bound = logger.bind(action=action, locator=locator, success=success, duration=duration, **extra)
    log_func = bound.debug if success else bound.warning

    msg = f"Action {action} | status={status}"
    if locator is not None:
        msg += f" | locator={locator}"
    if duration is not None:
        msg += f" | duration={duration:.3f}s"

    log_func(msg)
