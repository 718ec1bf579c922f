"""
Cypher statements for the two six degrees traversals.

Graph model (concordance): content MENTIONS a source person node which is
EQUIVALENT_TO the canonical person carrying prefUUID/prefLabel. Content
nodes carry uuid, prefLabel (the title) and publishedDateEpoch.

Each traversal is a single statement; counting and content sampling happen
inside it.
"""
from typing import Any, Dict, Tuple

from services.sixdegrees.params import ConnectedPeopleParams, MostMentionedParams

CONNECTED_PEOPLE_QUERY = """
MATCH (c:Content)
WHERE c.publishedDateEpoch > $fromDate
  AND c.publishedDateEpoch < $toDate
MATCH (p:Person {prefUUID: $uuid})<-[:EQUIVALENT_TO]-(:Person)<-[:MENTIONS]-(c)
MATCH (c)-[:MENTIONS]->(:Person)-[:EQUIVALENT_TO]->(p2:Person)
WHERE p2 <> p
WITH DISTINCT c, p2
ORDER BY c.uuid DESC
WITH p2,
     count(c) AS cm,
     collect({uuid: c.uuid, prefLabel: c.prefLabel})[0..$contentLimit] AS contentList
WHERE cm >= $minimumConnections
RETURN p2.prefUUID AS uuid,
       p2.prefLabel AS prefLabel,
       cm AS count,
       contentList
ORDER BY count DESC, uuid ASC
LIMIT $limit
"""

MOST_MENTIONED_QUERY = """
MATCH (c:Content)-[m:MENTIONS]->(:Person)-[:EQUIVALENT_TO]->(p:Person)
WHERE c.publishedDateEpoch > $fromDate
  AND c.publishedDateEpoch < $toDate
WITH p.prefUUID AS uuid,
     p.prefLabel AS prefLabel,
     count(m) AS mentions
RETURN uuid, prefLabel, mentions
ORDER BY mentions DESC, uuid ASC
LIMIT $limit
"""

CONNECTIVITY_QUERY = "RETURN 1 AS test"


def build_connected_people_query(params: ConnectedPeopleParams) -> Tuple[str, Dict[str, Any]]:
    """Return the connected people statement and its named parameters."""
    return CONNECTED_PEOPLE_QUERY, params.to_cypher()


def build_most_mentioned_query(params: MostMentionedParams) -> Tuple[str, Dict[str, Any]]:
    """Return the most mentioned statement and its named parameters."""
    return MOST_MENTIONED_QUERY, params.to_cypher()
