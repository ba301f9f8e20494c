from datetime import datetime
from enum import StrEnum
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import LoginError
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher


class UserRole(StrEnum):
    CUSTOMER = 'CUSTOMER'
    ORGANIZER = 'ORGANIZER'


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.CUSTOMER
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('Invalid email or password')

        return user_entity

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        """Set password using provided password hasher"""
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )
