"""
Parsing of Go-style duration strings ("1h", "2h45m", "90s", "1.5h").

The CACHE_DURATION setting uses this format, so the header value a deployment
sets keeps its meaning.
"""
import re

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(value: str) -> float:
    """
    Parse a duration string into seconds.

    A duration is an optionally signed sequence of decimal numbers, each with
    a unit suffix. "0" is accepted without a unit.

    Raises:
        ValueError: if the string is not a valid duration
    """
    text = value or ""
    if not text:
        raise ValueError(f"invalid duration {value!r}")

    sign = 1.0
    if text[0] in "+-":
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]

    if text == "0":
        return 0.0

    total = 0.0
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration {value!r}")
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()

    if pos == 0:
        raise ValueError(f"invalid duration {value!r}")
    return sign * total


def cache_control_header(duration: str) -> str:
    """Build the public Cache-Control header for a duration string."""
    seconds = parse_duration(duration)
    return f"max-age={seconds:.0f}, public"
