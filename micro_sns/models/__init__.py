from micro_sns.models.user import User
from micro_sns.models.post import Post
from micro_sns.models.comment import Comment
from micro_sns.models.engagement import Follow, Like

__all__ = ["User", "Post", "Comment", "Follow", "Like"]
