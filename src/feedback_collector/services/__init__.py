"""
feedback_collector.services

Service-layer package.

Responsibilities:
- Hold request-independent decision rules used by the routers.
"""

# Package marker.
