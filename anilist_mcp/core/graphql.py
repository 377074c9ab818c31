"""GraphQL transport for the AniList endpoint."""

import json
import re
import time
from typing import Any, Dict

from ..config import get_settings
from ..utils.logger import get_logger
from .errors import GraphQLError
from .http_client import http_post

logger = get_logger("graphql")

_OPERATION = re.compile(r"\bquery\s+(\w+)")


def _operation_name(query: str) -> str:
    m = _OPERATION.search(query)
    return m.group(1) if m else "anonymous"


def gql(query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
    """Execute one GraphQL query and return its `data` object.

    Errors that come with partial data (AniList answers 404 "Not Found." with
    `{"User": null}`) are logged and the data returned, so tools can decide
    how to report the missing object. 5xx responses raise `requests.HTTPError`.
    """
    op = _operation_name(query)
    t0 = time.perf_counter()
    r = http_post(str(get_settings().endpoint), json={"query": query, "variables": variables},
                  headers={"Content-Type": "application/json", "Accept": "application/json"})
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    logger.info("gql_request", extra={"operation": op, "status": r.status_code, "elapsed_ms": round(elapsed_ms, 1)})

    if r.status_code >= 500:
        r.raise_for_status()

    try:
        body = r.json()
    except ValueError as e:
        raise GraphQLError(f"{op}: upstream returned a non-JSON body (HTTP {r.status_code})") from e

    errors = body.get("errors") if isinstance(body, dict) else None
    data = body.get("data") if isinstance(body, dict) else None

    if data is None:
        if errors:
            raise GraphQLError(json.dumps(errors, ensure_ascii=False))
        raise GraphQLError(f"{op}: upstream response carried no data (HTTP {r.status_code})")

    if errors:
        logger.warning("gql_partial_errors", extra={"operation": op, "errors": errors})
    return data
