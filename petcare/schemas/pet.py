"""Pet schemas for API request/response validation."""
import uuid
from datetime import datetime, date
from typing import Optional

from pydantic import Field, field_validator

from petcare.models.enums import AccessRole, PetType
from petcare.schemas.common import CamelModel, not_blank


class PetBase(CamelModel):
    """Base schema for pet data."""
    name: str = Field(..., min_length=1, max_length=255)
    type: PetType
    breed: Optional[str] = Field(None, max_length=255)
    age: Optional[int] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    avatar: Optional[str] = Field(None, max_length=500)

    # Extended profile
    favorite_toys: Optional[str] = None
    allergies: Optional[str] = None
    special_needs: Optional[str] = None
    adoption_date: Optional[date] = None

    @field_validator("name")
    @classmethod
    def validate_name_not_whitespace(cls, v: str) -> str:
        """Ensure name is not empty or whitespace-only."""
        return not_blank(v)


class PetCreate(PetBase):
    """Schema for creating a new pet."""
    pass


class PetUpdate(CamelModel):
    """Schema for updating a pet. Only provided fields are changed."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[PetType] = None
    breed: Optional[str] = Field(None, max_length=255)
    age: Optional[int] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    avatar: Optional[str] = Field(None, max_length=500)
    favorite_toys: Optional[str] = None
    allergies: Optional[str] = None
    special_needs: Optional[str] = None
    adoption_date: Optional[date] = None

    @field_validator("name")
    @classmethod
    def validate_name_not_whitespace(cls, v: Optional[str]) -> str:
        """Name may be omitted but not cleared."""
        if v is None:
            raise ValueError("Name cannot be null")
        return not_blank(v)

    @field_validator("type")
    @classmethod
    def validate_type_not_null(cls, v: Optional[PetType]) -> PetType:
        if v is None:
            raise ValueError("Type cannot be null")
        return v


class PetRead(PetBase):
    """Schema for reading pet data."""
    id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime
    updated_at: Optional[datetime] = None
    access_role: AccessRole = Field(AccessRole.OWNER, validate_default=True)
