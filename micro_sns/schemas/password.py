"""Change password schema."""
from pydantic import BaseModel, Field


class ChangePasswordRequest(BaseModel):
    model_config = {"populate_by_name": True}

    user_id: int = Field(..., ge=1)
    old_password: str = Field(..., min_length=1, alias="oldPassword")
    new_password: str = Field(..., min_length=1, alias="newPassword")
