# Six degrees query subsystem: window/parameter resolution, Cypher
# traversals, result mapping and the query service.
from .service import CypherQueryService, SixDegreesDriver
from .mapper import ResultMapper
from .params import ConnectedPeopleParams, MostMentionedParams, resolve_int
from .window import QueryWindow, resolve_window

__all__ = [
    "ConnectedPeopleParams",
    "CypherQueryService",
    "MostMentionedParams",
    "QueryWindow",
    "ResultMapper",
    "SixDegreesDriver",
    "resolve_int",
    "resolve_window",
]
