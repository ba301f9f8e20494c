"""
User API Schemas - Pydantic models for request/response
"""

from pydantic import BaseModel, EmailStr, Field, SecretStr

from src.service.ticketing.domain.entity.user_entity import UserRole


class CreateUserRequest(BaseModel):
    """Create user request schema"""

    email: EmailStr
    password: SecretStr = Field(
        ...,
        min_length=8,
        max_length=72,
        description='Password must be 8-72 characters (bcrypt limit)',
    )
    name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.CUSTOMER

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'customer@example.com',
                'password': 'P@ssw0rd',
                'name': 'Jane Doe',
                'role': 'CUSTOMER',
            }
        }


class LoginRequest(BaseModel):
    """User login request schema"""

    email: EmailStr
    password: SecretStr = Field(
        ..., min_length=1, max_length=72, description='User password (max 72 chars)'
    )

    class Config:
        json_schema_extra = {'example': {'email': 'c@t.com', 'password': 'P@ssw0rd'}}


class UserResponse(BaseModel):
    """User response schema"""

    id: int
    email: str
    name: str
    role: UserRole

    class Config:
        from_attributes = True
        json_schema_extra = {
            'example': {
                'id': 1,
                'email': 'customer@example.com',
                'name': 'Jane Doe',
                'role': 'CUSTOMER',
            }
        }


class LoginResponse(UserResponse):
    access_token: str
    token_type: str = 'bearer'
