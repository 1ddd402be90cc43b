"""structlog setup for applications embedding the library.

Library modules only call ``structlog.get_logger()`` and emit debug events;
nothing is configured on import. Call ``configure_logging`` once at startup
to get leveled, timestamped console output.
"""

import logging

import structlog


def configure_logging(level: int | str = logging.INFO) -> None:
    """Route structlog events to the console at ``level`` and above.

    Args:
        level: A stdlib level number or name, e.g. ``logging.DEBUG`` or "debug"
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level {level!r}")
        level = resolved

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
