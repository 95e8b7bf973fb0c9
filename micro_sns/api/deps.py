"""API dependencies: db session."""
from micro_sns.db.session import get_db

__all__ = ["get_db"]
