import json
import logging

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


def parse_log_level(value: str) -> int:
    """Map a LOG_LEVEL name to a logging level, falling back to INFO."""
    return _LEVELS.get((value or "").strip().lower(), logging.INFO)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=parse_log_level(level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def structured_log_line(payload: dict) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
