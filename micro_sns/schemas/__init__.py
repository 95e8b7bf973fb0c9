from micro_sns.schemas.common import AffectedRows, Envelope, Message
from micro_sns.schemas.user import UserCreate, UserCreated, UserResponse, LoginRequest
from micro_sns.schemas.password import ChangePasswordRequest
from micro_sns.schemas.post import PostCreate, PostUpdate, PostCreated, PostResponse
from micro_sns.schemas.comment import CommentCreate, CommentUpdate, CommentCreated, CommentResponse
from micro_sns.schemas.engagement import (
    LikeRequest,
    LikeCount,
    FollowCreate,
    FollowUser,
    FollowCounts,
    FollowStatus,
)
