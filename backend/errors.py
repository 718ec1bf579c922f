"""
Error taxonomy for the six degrees query subsystem.

Resolver errors are user input errors and surface as HTTP 400. Engine and
mapper errors surface as HTTP 500. "Not found" is not an error: the query
service returns it as a boolean next to an empty list.
"""


class SixDegreesError(Exception):
    """Base class for all errors raised by the six degrees services."""


class InvalidDateError(SixDegreesError):
    """A supplied date query parameter is not a YYYY-MM-DD calendar date."""

    def __init__(self, param: str, value: str):
        self.param = param
        self.value = value
        super().__init__(f"invalid {param}: {value!r} is not a YYYY-MM-DD date")


class InvalidParamError(SixDegreesError):
    """A supplied integer query parameter is not a base-10 64-bit integer."""

    def __init__(self, param: str, value: str, reason: str = "is not a base-10 integer"):
        self.param = param
        self.value = value
        super().__init__(f"invalid literal for {param}: {value!r} {reason}")


class GraphEngineError(SixDegreesError):
    """
    Execution failure reported by Neo4j.

    The message is the driver's own message; the driver exception is
    chained as __cause__.
    """


class MapperError(SixDegreesError):
    """A graph row lacks a field required to build a public entity."""
