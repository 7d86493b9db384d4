"""
feedback_collector.api

HTTP layer for the Feedback Collector service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and template rendering.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers stay thin: parse the form, call repositories, pick the view to render.
