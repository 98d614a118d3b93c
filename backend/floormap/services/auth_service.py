"""Auth Service: registration, login, account maintenance and admin user management.

Invariants:
    - Email is unique; registration with a taken email raises ValidationError
    - Login failures are indistinguishable (unknown email == wrong password)
    - Admins cannot change their own role or delete themselves (checked before any write)
    - Deleting a user removes the user's maps with their floors, pins and editors

Design Decisions:
    - Signing secret and TTL are injected (Settings), not read from globals
"""

import logging

from floormap.core.domain_types import Role
from floormap.core.errors import (
    CredentialMismatchError, CurrentPasswordMismatchError, UserNotFoundError,
    ValidationError,
)
from floormap.core.permissions import check_not_self
from floormap.core.repository_protocols import UserLike, UserRepository
from floormap.infrastructure.credentials import (
    hash_password, issue_session, verify_password,
)

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        users: UserRepository,
        jwt_secret: str,
        jwt_algorithm: str = "HS256",
        session_ttl_hours: int = 24,
    ):
        self.users = users
        self.jwt_secret = jwt_secret
        self.jwt_algorithm = jwt_algorithm
        self.session_ttl_hours = session_ttl_hours

    async def register(self, email: str, password: str, name: str) -> UserLike:
        """Create a regular user account."""
        email = email.strip().lower()
        if await self.users.get_by_email(email) is not None:
            raise ValidationError("This email address is already registered", field="email")
        user = await self.users.create({
            "email": email,
            "password": hash_password(password),
            "name": name,
            "role": Role.USER.value,
        })
        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def login(self, email: str, password: str) -> tuple[str, UserLike]:
        """Return (bearer token, user) for valid credentials."""
        user = await self.users.get_by_email(email.strip().lower())
        if user is None:
            raise CredentialMismatchError()
        verify_password(user.password, password)
        token = issue_session(
            user.id, user.email, user.role, self.jwt_secret,
            ttl_hours=self.session_ttl_hours, algorithm=self.jwt_algorithm,
        )
        return token, user

    async def get_user(self, user_id: str) -> UserLike:
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def update_profile(self, user_id: str, name: str) -> UserLike:
        user = await self.get_user(user_id)
        user.name = name
        return await self.users.update(user)

    async def change_password(
        self, user_id: str, current_password: str, new_password: str,
    ) -> None:
        user = await self.get_user(user_id)
        try:
            verify_password(user.password, current_password)
        except CredentialMismatchError:
            raise CurrentPasswordMismatchError()
        user.password = hash_password(new_password)
        await self.users.update(user)
        logger.info("Password changed", extra={"user_id": user_id})

    async def list_users(self) -> list[UserLike]:
        return await self.users.list_all()

    async def update_role(self, acting_user_id: str, target_user_id: str, role: str) -> UserLike:
        """Admin action: set another user's role."""
        check_not_self(acting_user_id, target_user_id, "change the role of")
        role = role.value if isinstance(role, Role) else role
        if role not in {r.value for r in Role}:
            raise ValidationError(f"Invalid role '{role}'", field="role")
        user = await self.get_user(target_user_id)
        user.role = role
        user = await self.users.update(user)
        logger.info(
            f"Role set to {role}",
            extra={"user_id": target_user_id, "fields": ["role"]},
        )
        return user

    async def delete_user(self, acting_user_id: str, target_user_id: str) -> None:
        """Admin action: delete another user with everything they own."""
        check_not_self(acting_user_id, target_user_id, "delete")
        await self.get_user(target_user_id)
        await self.users.delete(target_user_id)
        logger.info("User deleted", extra={"user_id": target_user_id})
