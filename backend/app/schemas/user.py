"""
Project Backend — User Request/Response Schemas
=================================================

What:  The JSON contract of the /user endpoints.
Why:   Keeps the stored User entity (password hash, deletion flag) separate
       from what clients send and receive.

Field names are camelCase on the wire (roleId, phoneNumber, statusCode)
and snake_case in Python; either form is accepted on input.

Every UserRequest field is optional at the schema level on purpose: missing
or blank values are reported by the validation layer in-band (statusCode
401 + description) instead of FastAPI's 422.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class UserRequest(BaseModel):
    """Body of POST /user/create and POST /user/update."""

    role_id: Optional[int] = Field(default=None, description="Role reference (positive)")
    name: Optional[str] = Field(default=None, description="Display name")
    phone_number: Optional[str] = Field(default=None, description="Contact phone number")
    email: Optional[str] = Field(default=None, description="Email address")
    password: Optional[str] = Field(
        default=None,
        description="At least 8 characters with upper, lower case and a digit",
    )

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class UserResponse(BaseModel):
    """
    What:  A user as returned to clients, or an in-band error.

    On success the entity fields are set and status_code is null.
    On failure only status_code and description are set.
    The password is never part of the response.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    role_id: Optional[int] = None
    status_code: Optional[int] = Field(
        default=None, description="Error code; null when the operation succeeded"
    )
    description: Optional[str] = Field(
        default=None, description="Error description from the message catalog"
    )

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }

    @classmethod
    def error(cls, status_code: int, description: str) -> "UserResponse":
        """Build an in-band error response."""
        return cls(status_code=status_code, description=description)
