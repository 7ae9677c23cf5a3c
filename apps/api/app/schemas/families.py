from datetime import datetime
from typing import Annotated, Any

from pydantic import EmailStr, Field, StringConstraints, field_validator

from app.schemas.common import ApiModel, id_to_str

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class FamilyCreate(ApiModel):
    family_name: Name
    member_name: Name


class FamilyCreateResponse(ApiModel):
    success: bool = True
    family_id: int
    message: str = "Family created successfully"


class FamilyMemberCreate(ApiModel):
    family_id: int
    email: EmailStr
    name: Name


class FamilyMemberResponse(ApiModel):
    id: str
    email: str
    name: str
    is_admin: bool
    joined_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value: Any) -> Any:
        return id_to_str(value)


class FamilyMemberCreateResponse(ApiModel):
    success: bool = True
    member: FamilyMemberResponse


class FamilyResponse(ApiModel):
    id: int
    family_name: str
    created_at: datetime
    members: list[FamilyMemberResponse] = Field(default_factory=list)


class MembershipSummary(ApiModel):
    family_id: int
    family_name: str
    member_id: str
    is_admin: bool


class MeResponse(ApiModel):
    email: str
    name: str | None = None
    memberships: list[MembershipSummary] = Field(default_factory=list)


class CategoryCreate(ApiModel):
    family_id: int
    name: Name
