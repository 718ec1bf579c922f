"""
Mapping of raw graph rows to the public six degrees entities.

Mapping is total: a row missing a required field raises MapperError rather
than being dropped. Row order is preserved.
"""
from typing import Any, Iterable, List, Mapping

from config import THING_ID_BASE_URL
from errors import MapperError
from models import ConnectedPerson, Content, Thing

API_PATHS = {
    "Person": "people",
    "Content": "content",
}


def id_url(uuid: str) -> str:
    """Canonical identity URI for an entity UUID."""
    return f"{THING_ID_BASE_URL}{uuid}"


def _require(row: Mapping[str, Any], key: str, kind: str) -> Any:
    value = row.get(key)
    if value is None or value == "":
        raise MapperError(f"{kind} row is missing required field '{key}': {dict(row)!r}")
    return value


class ResultMapper:
    """Builds entities with API URLs rooted at a fixed base URL."""

    def __init__(self, api_base_url: str):
        self.api_base_url = api_base_url.rstrip("/")

    def api_url(self, uuid: str, entity_type: str) -> str:
        path = API_PATHS[entity_type]
        return f"{self.api_base_url}/{path}/{uuid}"

    def to_person(self, row: Mapping[str, Any]) -> Thing:
        uuid = _require(row, "uuid", "person")
        return Thing(
            id=id_url(uuid),
            api_url=self.api_url(uuid, "Person"),
            pref_label=row.get("prefLabel") or None,
        )

    def to_content(self, row: Mapping[str, Any]) -> Content:
        uuid = _require(row, "uuid", "content")
        return Content(
            id=uuid,
            api_url=self.api_url(uuid, "Content"),
            title=row.get("prefLabel"),
        )

    def to_connected_person(self, row: Mapping[str, Any]) -> ConnectedPerson:
        count = _require(row, "count", "connected person")
        return ConnectedPerson(
            person=self.to_person(row),
            count=int(count),
            content=[self.to_content(c) for c in row.get("contentList") or []],
        )

    def to_connected_people(self, rows: Iterable[Mapping[str, Any]]) -> List[ConnectedPerson]:
        return [self.to_connected_person(row) for row in rows]

    def to_mentioned_people(self, rows: Iterable[Mapping[str, Any]]) -> List[Thing]:
        return [self.to_person(row) for row in rows]
