"""
feedback_collector.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Only the `database_url` setting ties this package to a backend; the default is
# a local SQLite file via aiosqlite.
