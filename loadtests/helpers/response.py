"""Response error extraction for load test observability.

Parses Bake & Taste API error responses into human-readable messages.
Handles two response shapes:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Domain errors (400/403/404/409/503): {"error": {"field": ["msg"]}, "kind": "InvalidInput"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a compact error message for Locust failure messages and log lines."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if "detail" in body and isinstance(body["detail"], list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if "error" in body:
        error = body["error"]
        kind = body.get("kind")
        if isinstance(error, dict):
            message = " | ".join(f"{k}: {v}" for k, v in error.items())
        else:
            message = str(error)
        return f"{kind}: {message}" if kind else message

    return str(body)[:300]
