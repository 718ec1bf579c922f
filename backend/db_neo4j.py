import logging

from fastapi import Request
from neo4j import Driver, GraphDatabase  # type: ignore[reportMissingImports]

from config import ServiceSettings
from services.sixdegrees import CypherQueryService, ResultMapper, SixDegreesDriver

logger = logging.getLogger(__name__)


def create_driver(settings: ServiceSettings) -> Driver:
    """
    Create the pooled Neo4j driver.

    The driver connects lazily, so an unreachable database does not stop the
    service from starting; the health check reports it instead.
    """
    if not settings.neo4j_password:
        raise ValueError(
            "NEO4J_PASSWORD environment variable is required. "
            "Please set it in your .env.local file (see .env.example for reference)."
        )
    # Connection pooling and keepalive to handle defunct connections
    return GraphDatabase.driver(
        settings.neo4j_uri,
        auth=(settings.neo4j_user, settings.neo4j_password),
        max_connection_lifetime=3600,  # 1 hour
        max_connection_pool_size=settings.neo4j_max_connection_pool_size,
        connection_acquisition_timeout=30,
        keep_alive=True,
    )


def create_query_service(driver: Driver, settings: ServiceSettings) -> CypherQueryService:
    return CypherQueryService(
        driver,
        ResultMapper(settings.api_base_url),
        database=settings.neo4j_database,
        query_timeout=settings.neo4j_query_timeout_seconds,
    )


def get_query_service(request: Request) -> SixDegreesDriver:
    """FastAPI dependency returning the query service built at startup."""
    return request.app.state.query_service
