"""
feedback_collector.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories for prompts and feedback.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories flush but never commit; the request handler owns the transaction.
