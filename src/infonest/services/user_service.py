from typing import Optional

from passlib.context import CryptContext
from pydantic import EmailStr, TypeAdapter, ValidationError

from ..domain.auth import SignupData
from ..domain.role import Role
from ..domain.user import Account, User
from ..exceptions import (
    DuplicateAccountError,
    DuplicateError,
    InvalidCredentialsError,
    SignupValidationError,
)
from ..logging_config import get_logger
from ..ports.repositories import UserRepository
from ..utils.password import validate_password_strength

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

_email_adapter = TypeAdapter(EmailStr)

INVALID_CREDENTIALS = "Invalid email or password"


class UserService:
    def __init__(self, user_repo: UserRepository, min_password_length: int = 8):
        self.user_repo = user_repo
        self.min_password_length = min_password_length

    def _validate(self, data: SignupData) -> Role:
        try:
            _email_adapter.validate_python(data.email or "")
        except ValidationError:
            raise SignupValidationError("A valid email address is required")
        if not (data.full_name or "").strip():
            raise SignupValidationError("Full name is required")

        is_valid, error_msg = validate_password_strength(
            data.password or "", self.min_password_length
        )
        if not is_valid:
            raise SignupValidationError(error_msg)

        role = Role.parse(data.role)
        if role is None:
            raise SignupValidationError(f"Unknown role: {data.role}")
        # a faculty account administers exactly one club
        if role is Role.FACULTY and not data.club_id:
            raise SignupValidationError("Faculty accounts must be assigned a club")
        return role

    async def create_user(self, data: SignupData) -> User:
        role = self._validate(data)
        account = Account(
            id=None,
            email=data.email.strip(),
            hashed_password=pwd_context.hash(data.password),
            name=data.full_name.strip(),
            role=role,
            club_id=data.club_id or None,
            department=data.department,
        )
        try:
            created = await self.user_repo.create(account)
        except DuplicateError:
            raise DuplicateAccountError("Email already registered")
        logger.debug(
            "user_created",
            extra={"id": created.id, "role": role.value, "email": created.email},
        )
        return created.to_user()

    async def authenticate(self, email: str, password: str, role: Optional[Role] = None) -> User:
        account = await self.user_repo.get_by_email(email or "")
        logger.debug("authenticate_lookup", extra={"email": email, "user_found": bool(account)})
        if account is None or not pwd_context.verify(password or "", account.hashed_password):
            raise InvalidCredentialsError(INVALID_CREDENTIALS)
        if role is not None and account.role is not role:
            raise InvalidCredentialsError(
                f"This account is not registered as {role.value}", code="role_mismatch"
            )
        return account.to_user()

    async def get_user(self, user_id: str) -> Optional[User]:
        account = await self.user_repo.get_by_id(user_id)
        return account.to_user() if account is not None else None
