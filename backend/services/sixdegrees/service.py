"""
Six degrees query service.

SixDegreesDriver is the capability interface the HTTP layer depends on.
CypherQueryService is its Neo4j implementation: one READ session and one
statement per call, no retries.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from neo4j import READ_ACCESS, Driver, Query
from neo4j.exceptions import DriverError, Neo4jError

from errors import GraphEngineError
from models import ConnectedPerson, Thing
from services.sixdegrees.mapper import ResultMapper
from services.sixdegrees.params import ConnectedPeopleParams, MostMentionedParams
from services.sixdegrees.queries import (
    CONNECTIVITY_QUERY,
    build_connected_people_query,
    build_most_mentioned_query,
)
from services.sixdegrees.window import QueryWindow

logger = logging.getLogger(__name__)


class SixDegreesDriver(ABC):
    """Read operations over the content/person graph."""

    @abstractmethod
    def connected_people(
        self,
        uuid: str,
        from_epoch: int,
        to_epoch: int,
        result_limit: int,
        minimum_connections: int,
        content_limit: int,
    ) -> Tuple[List[ConnectedPerson], bool]:
        """
        People co-mentioned with the given person inside the window.

        Returns:
            (connected people, found). found is False when no row qualifies.

        Raises:
            GraphEngineError: if the query fails
        """

    @abstractmethod
    def most_mentioned(
        self, from_epoch: int, to_epoch: int, result_limit: int
    ) -> Tuple[List[Thing], bool]:
        """People ranked by mention count inside the window."""

    @abstractmethod
    def check_connectivity(self) -> None:
        """Raise GraphEngineError if the graph cannot answer a trivial query."""


class CypherQueryService(SixDegreesDriver):
    def __init__(
        self,
        driver: Driver,
        mapper: ResultMapper,
        database: Optional[str] = None,
        query_timeout: Optional[float] = None,
    ):
        self.driver = driver
        self.mapper = mapper
        self.database = database
        self.query_timeout = query_timeout

    def _read(self, statement: str, parameters: Dict[str, Any]) -> List[Dict[str, Any]]:
        try:
            with self.driver.session(
                database=self.database, default_access_mode=READ_ACCESS
            ) as session:
                result = session.run(Query(statement, timeout=self.query_timeout), parameters)
                return [record.data() for record in result]
        except (Neo4jError, DriverError) as e:
            logger.error(f"Neo4j query failed: {e}")
            logger.debug(f"Failed query: {statement}")
            raise GraphEngineError(str(e)) from e

    def connected_people(
        self,
        uuid: str,
        from_epoch: int,
        to_epoch: int,
        result_limit: int,
        minimum_connections: int,
        content_limit: int,
    ) -> Tuple[List[ConnectedPerson], bool]:
        params = ConnectedPeopleParams(
            uuid=uuid,
            window=QueryWindow(from_epoch, to_epoch),
            result_limit=result_limit,
            minimum_connections=minimum_connections,
            content_limit=content_limit,
        )
        rows = self._read(*build_connected_people_query(params))
        if not rows:
            return [], False
        return self.mapper.to_connected_people(rows), True

    def most_mentioned(
        self, from_epoch: int, to_epoch: int, result_limit: int
    ) -> Tuple[List[Thing], bool]:
        params = MostMentionedParams(
            window=QueryWindow(from_epoch, to_epoch),
            result_limit=result_limit,
        )
        rows = self._read(*build_most_mentioned_query(params))
        if not rows:
            return [], False
        return self.mapper.to_mentioned_people(rows), True

    def check_connectivity(self) -> None:
        self._read(CONNECTIVITY_QUERY, {})
