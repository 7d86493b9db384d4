"""
feedback_collector.api.__main__

Entrypoint for running the service via `python -m feedback_collector.api`.

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from feedback_collector.api.app import create_app
from feedback_collector.observability.logging import get_logger
from feedback_collector.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    log.info("serving", admin_url=f"http://localhost:{settings.api_port}/admin")
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
