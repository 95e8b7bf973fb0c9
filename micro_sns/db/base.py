"""SQLAlchemy declarative base and model imports for Alembic."""
from micro_sns.db.session import Base  # noqa: F401
from micro_sns.models.user import User  # noqa: F401
from micro_sns.models.post import Post  # noqa: F401
from micro_sns.models.comment import Comment  # noqa: F401
from micro_sns.models.engagement import Follow, Like  # noqa: F401

__all__ = ["Base", "User", "Post", "Comment", "Follow", "Like"]
