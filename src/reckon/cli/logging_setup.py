"""Logging configuration for the reckon command-line host."""

import logging


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging on stderr; the library itself only emits records."""
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,  # Override any existing configuration
    )
    logging.getLogger("reckon").setLevel(log_level)
