"""User models for the User API."""

from typing import ClassVar

from pydantic import BaseModel, EmailStr, Field


class UserBase(BaseModel):
    """Fields shared by stored users and create requests."""

    name: str = Field(..., min_length=1, description="Full name of the user")
    email: EmailStr = Field(..., description="Email address of the user, unique across users")
    age: int | float = Field(..., description="Age of the user in years")
    bio: str | None = Field(default=None, description="Short biography, generated when not supplied")
    address: str | None = Field(default=None, description="Where the user lives; drives the bio language")


class UserCreate(UserBase):
    """Payload for creating a user."""

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "name": "Budi Santoso",
                "email": "budi.santoso@gmail.com",
                "age": 27,
                "address": "Bandung",
            }
        }


class UserUpdate(BaseModel):
    """Partial update payload. Unset and null fields are left untouched."""

    name: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    age: int | float | None = None
    bio: str | None = None
    address: str | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class User(UserBase):
    """User entity model."""

    id: str = Field(..., description="Store-assigned identifier")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": "3f2b8c1e9a4d4b6f8e2a7c5d1b0e9f34",
                "name": "Budi Santoso",
                "email": "budi.santoso@gmail.com",
                "age": 27,
                "bio": "Budi, 27, pecinta kopi dari Bandung yang hobi naik gunung.",
                "address": "Bandung",
            }
        }
