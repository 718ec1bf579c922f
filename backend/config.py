import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables in priority order:
# 1. backend/.env (lowest priority)
# 2. repo_root/.env (overrides backend)
# 3. repo_root/.env.local (highest priority - overrides everything)
repo_root = Path(__file__).parent.parent
env_local = repo_root / ".env.local"
env_file = repo_root / ".env"
backend_env = Path(__file__).parent / ".env"

if backend_env.exists():
    load_dotenv(dotenv_path=backend_env, override=False)
if env_file.exists():
    load_dotenv(dotenv_path=env_file, override=True)
if env_local.exists():
    load_dotenv(dotenv_path=env_local, override=True)


def _truthy(value: str) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y", "on"}


# Endpoint defaults
DEFAULT_CONNECTED_PEOPLE_RESULT_LIMIT = 10
DEFAULT_MOST_MENTIONED_RESULT_LIMIT = 20
DEFAULT_MINIMUM_CONNECTIONS = 5
DEFAULT_CONTENT_LIMIT = 3

# Identity URIs are environment independent; apiUrl values are not.
THING_ID_BASE_URL = "http://api.ft.com/things/"

SYSTEM_CODE = "public-six-degrees-api"
SERVICE_DESCRIPTION = (
    "Six Degrees Backend provides mostMentionedPeople and connectedPeople "
    "endpoints for Six Degrees Frontend."
)


@dataclass(frozen=True)
class BuildInfo:
    version: str
    repository: str
    revision: str
    builder: str
    date_time: str

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "repository": self.repository,
            "revision": self.revision,
            "builder": self.builder,
            "dateTime": self.date_time,
        }


@dataclass(frozen=True)
class ServiceSettings:
    app_name: str
    port: int

    neo4j_uri: str
    neo4j_user: str
    neo4j_password: Optional[str]
    neo4j_database: str
    neo4j_query_timeout_seconds: float
    neo4j_max_connection_pool_size: int

    api_base_url: str
    cache_duration: str

    log_level: str
    request_logging_on: bool

    build_info: BuildInfo

    @classmethod
    def from_env(cls) -> "ServiceSettings":
        build_info = BuildInfo(
            version=os.getenv("BUILD_VERSION", ""),
            repository=os.getenv("BUILD_REPOSITORY", ""),
            revision=os.getenv("BUILD_REVISION", ""),
            builder=os.getenv("BUILD_BUILDER", ""),
            date_time=os.getenv("BUILD_DATETIME", ""),
        )
        return cls(
            app_name=os.getenv("APP_NAME", "public-six-degrees"),
            port=int(os.getenv("APP_PORT", "8080") or 8080),
            neo4j_uri=os.getenv("NEO4J_URI", "bolt://localhost:7687"),
            neo4j_user=os.getenv("NEO4J_USER", "neo4j"),
            neo4j_password=os.getenv("NEO4J_PASSWORD"),  # Required - no default for security
            neo4j_database=os.getenv("NEO4J_DATABASE", "neo4j"),
            neo4j_query_timeout_seconds=float(os.getenv("NEO4J_QUERY_TIMEOUT_SECONDS", "60") or 60),
            neo4j_max_connection_pool_size=max(
                1, int(os.getenv("NEO4J_MAX_CONNECTION_POOL_SIZE", "100") or 100)
            ),
            api_base_url=os.getenv("API_BASE_URL", "http://api.ft.com").rstrip("/"),
            cache_duration=os.getenv("CACHE_DURATION", "1h"),
            log_level=os.getenv("LOG_LEVEL", "info"),
            request_logging_on=_truthy(os.getenv("REQUEST_LOGGING_ON", "true")),
            build_info=build_info,
        )
