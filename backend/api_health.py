"""
Operational endpoints: health, good-to-go, ping and build info.
"""
import logging
from datetime import datetime, timezone
from typing import Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from config import SERVICE_DESCRIPTION, SYSTEM_CODE
from db_neo4j import get_query_service
from errors import SixDegreesError
from services.sixdegrees import SixDegreesDriver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

CHECK_SEVERITY = 3
NEO4J_CHECK = {
    "name": "Check connectivity to Neo4j",
    "severity": CHECK_SEVERITY,
    "businessImpact": "Unable to respond to Public Six Degrees",
    "panicGuide": "https://dewey.ft.com/public-six-degrees-api.html",
    "technicalSummary": (
        "Cannot connect to Neo4j. If this check fails, check that the Neo4j "
        "instance is up and running. NEO4J_URI holds its address."
    ),
}


def check_neo4j(service: SixDegreesDriver) -> Tuple[bool, str]:
    """Run the connectivity check and describe the outcome."""
    try:
        service.check_connectivity()
    except SixDegreesError as e:
        logger.error(f"Neo4j health check failed: {e}")
        return False, "Error connecting to neo4j"
    return True, "Connectivity to neo4j is ok"


@router.get("/__health")
def health_check(service: SixDegreesDriver = Depends(get_query_service)):
    """Health JSON with a single Neo4j connectivity check. Always HTTP 200."""
    ok, output = check_neo4j(service)
    check = {
        **NEO4J_CHECK,
        "ok": ok,
        "checkOutput": output,
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    }
    body = {
        "schemaVersion": 1,
        "systemCode": SYSTEM_CODE,
        "name": "Public Six Degrees API",
        "description": SERVICE_DESCRIPTION,
        "ok": ok,
        "checks": [check],
    }
    if not ok:
        body["severity"] = CHECK_SEVERITY
    return body


@router.get("/__gtg")
def good_to_go(service: SixDegreesDriver = Depends(get_query_service)):
    """503 when Neo4j is unreachable, for load balancers."""
    ok, output = check_neo4j(service)
    if not ok:
        return PlainTextResponse(output, status_code=503)
    return PlainTextResponse("OK")


@router.get("/__ping")
@router.get("/ping")
def ping():
    return PlainTextResponse("pong")


@router.get("/__build-info")
@router.get("/build-info")
def build_info(request: Request):
    return JSONResponse(request.app.state.settings.build_info.to_dict())
