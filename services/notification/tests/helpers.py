"""
Where: services/notification/tests/helpers.py
What: Request and fixture builders shared by notification tests.
"""

from pathlib import Path

from starlette.requests import Request

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    return (FIXTURES_DIR / name).read_bytes()


def make_request(
    body: bytes,
    content_type: str = "text/plain; charset=UTF-8",
    headers: dict = None,
    app=None,
) -> Request:
    """Build a Starlette Request whose body stream yields `body` once."""
    raw_headers = [(b"content-type", content_type.encode("latin-1"))]
    for key, value in (headers or {}).items():
        raw_headers.append((key.lower().encode("latin-1"), value.encode("latin-1")))

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/topic",
        "query_string": b"",
        "headers": raw_headers,
    }
    if app is not None:
        scope["app"] = app

    async def receive():
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)
