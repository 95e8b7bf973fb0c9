"""User directory: registration, login, password change, lookup and search."""
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.core.errors import AuthError, ConflictError, NotFoundError
from micro_sns.core.logging import get_logger
from micro_sns.core.security import get_password_hash, verify_password
from micro_sns.models.user import User
from micro_sns.schemas.user import UserCreate, UserResponse

logger = get_logger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(select(User).where(User.user_id == user_id))
    return result.scalar_one_or_none()


async def require_user(db: AsyncSession, user_id: int) -> User:
    user = await get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


async def create_user(db: AsyncSession, data: UserCreate) -> User:
    if await get_user_by_email(db, data.email):
        logger.info("Register rejected, email taken: %s", data.email)
        raise ConflictError("Email already registered")
    user = User(
        name=data.name,
        email=data.email,
        password_hash=get_password_hash(data.password),
        bio=data.bio,
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        await db.rollback()
        raise ConflictError("Email already registered")
    await db.refresh(user)
    logger.info("Registered user %s (%s)", user.user_id, user.email)
    return user


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User:
    user = await get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Login failed for %s", email)
        raise AuthError("Invalid email or password")
    return user


async def change_password(db: AsyncSession, user_id: int, old_password: str, new_password: str) -> None:
    """Replace a user's password after checking the old one.

    The read and the write are separate statements; a concurrent change
    between them is last-writer-wins.
    """
    user = await require_user(db, user_id)
    if not verify_password(old_password, user.password_hash):
        raise AuthError("Current password is incorrect")
    user.password_hash = get_password_hash(new_password)
    await db.flush()
    logger.info("Password changed for user %s", user_id)


async def search_users(db: AsyncSession, keyword: str | None, limit: int) -> list[User]:
    query = (keyword or "").strip()
    if not query:
        return []
    result = await db.execute(select(User).where(User.name.icontains(query, autoescape=True)).limit(limit))
    return list(result.scalars().all())


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        user_id=user.user_id,
        name=user.name,
        email=user.email,
        bio=user.bio,
        created_at=user.created_at,
    )
