"""
Integer query parameter resolution and the typed per-query parameter sets.
"""
import re
from dataclasses import dataclass

from errors import InvalidParamError
from services.sixdegrees.window import QueryWindow

_BASE10_INT = re.compile(r"[+-]?[0-9]+")
# Bolt integers are signed 64-bit
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def resolve_int(param: str, value: str, default: int) -> int:
    """
    Resolve an optional integer query parameter.

    An empty string yields the default. Anything else must be a base-10
    integer that fits in 64 bits. No other range check is applied: zero
    and negative values flow through to the query, which returns no rows
    for them.

    Raises:
        InvalidParamError: if the value is not a base-10 integer or is out
            of the 64-bit range
    """
    if value == "":
        return default
    if not _BASE10_INT.fullmatch(value):
        raise InvalidParamError(param, value)
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise InvalidParamError(param, value, "is out of range")
    return number


@dataclass(frozen=True)
class ConnectedPeopleParams:
    uuid: str
    window: QueryWindow
    result_limit: int
    minimum_connections: int
    content_limit: int

    def to_cypher(self) -> dict:
        # Cypher rejects a negative LIMIT and reads negative slice bounds
        # from the end of the list.
        return {
            "uuid": self.uuid,
            "fromDate": self.window.from_epoch,
            "toDate": self.window.to_epoch,
            "minimumConnections": self.minimum_connections,
            "limit": max(0, self.result_limit),
            "contentLimit": max(0, self.content_limit),
        }


@dataclass(frozen=True)
class MostMentionedParams:
    window: QueryWindow
    result_limit: int

    def to_cypher(self) -> dict:
        return {
            "fromDate": self.window.from_epoch,
            "toDate": self.window.to_epoch,
            "limit": max(0, self.result_limit),
        }
