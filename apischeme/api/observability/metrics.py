from __future__ import annotations

import re
from prometheus_client import Counter, Histogram


def normalize_path(path: str) -> str:
    """Reduce high-cardinality paths for metrics labels."""
    p = path or "/"

    # /api/<version>/kinds/<kind>
    p = re.sub(r"^(/api/[^/]+/kinds)/[^/]+$", r"\1/:kind", p)
    # /api/<version>/...
    p = re.sub(r"^/api/(?!versions$)[^/]+/", "/api/:version/", p)

    return p


HTTP_REQUESTS_TOTAL = Counter(
    "apischeme_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "apischeme_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)
