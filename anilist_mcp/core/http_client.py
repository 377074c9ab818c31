"""HTTP client for anilist-mcp.

One request per call: no retry, no backoff. Failures propagate to the caller.
"""

import requests

from ..config import get_settings


def _req(method: str, url: str, **kw) -> requests.Response:
    s = get_settings()
    timeout = kw.pop("timeout", s.timeout_s)
    headers = {"User-Agent": s.user_agent, **kw.pop("headers", {})}
    return requests.request(method, url, timeout=timeout, headers=headers, **kw)


def http_post(url: str, **kw) -> requests.Response:
    return _req("POST", url, **kw)
