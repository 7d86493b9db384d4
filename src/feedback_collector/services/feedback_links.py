"""
feedback_collector.services.feedback_links

Shareable feedback link construction.

Responsibilities:
- Resolve the public host of a request, honoring reverse-proxy headers.
- Pick the link protocol from the inbound request's host string.
- Build the public `/feedback/{prompt_id}` URL handed to respondents.
"""

from __future__ import annotations

from starlette.requests import Request

# Substring match, not equality: "localhost:3000" and "127.0.0.1:8080" both count.
_PLAIN_HTTP_HOST_MARKERS = ("localhost", "127.0.0.1")


def link_protocol(host: str) -> str:
    if any(marker in host for marker in _PLAIN_HTTP_HOST_MARKERS):
        return "http"
    return "https"


def _forwarded_host(header: str) -> str | None:
    # RFC 7239: only the first (client-facing) element counts,
    # e.g. `for=1.2.3.4;host=a.com;proto=https, for=10.0.0.1`.
    first = header.split(",", 1)[0]
    for pair in first.split(";"):
        key, sep, value = pair.strip().partition("=")
        if sep and key.strip().lower() == "host":
            return value.strip().strip('"') or None
    return None


def request_host(request: Request) -> str:
    """
    Host the client used to reach us: `Forwarded: host=`, then `X-Forwarded-Host`,
    then `Host`, then the server address from the request URL.
    """

    forwarded = request.headers.get("forwarded")
    if forwarded:
        host = _forwarded_host(forwarded)
        if host:
            return host
    x_forwarded_host = request.headers.get("x-forwarded-host", "").split(",", 1)[0].strip()
    if x_forwarded_host:
        return x_forwarded_host
    host = request.headers.get("host", "").strip()
    if host:
        return host
    return request.url.netloc


def feedback_url(host: str, prompt_id: str) -> str:
    """
    >>> feedback_url("localhost:3000", "abc")
    'http://localhost:3000/feedback/abc'
    >>> feedback_url("example.com", "abc")
    'https://example.com/feedback/abc'
    """

    return f"{link_protocol(host)}://{host}/feedback/{prompt_id}"


# --- Module Notes -----------------------------------------------------------
# Deployments behind TLS-terminating proxies get https for any public host name;
# there is deliberately no configuration override for this rule.
