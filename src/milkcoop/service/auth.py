"""
Auth service: registration and login.

Passwords are stored as bcrypt digests and never leave this module in any
response.
"""

import logging

from sqlalchemy.orm import Session

from milkcoop.contracts.payloads import LoginPayload, RegisterPayload
from milkcoop.core.security import DEFAULT_ROUNDS, get_password_hash, verify_password
from milkcoop.exceptions import AuthError, ConflictError, ValidationError
from milkcoop.models import ROLE_USER
from milkcoop.persistence.repo import UserRepository
from milkcoop.service.base import storage_guard

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username/phone or password."


class AuthService:
    def __init__(self, db: Session, bcrypt_rounds: int = DEFAULT_ROUNDS):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds
        self.users = UserRepository(db)

    def register(self, payload: RegisterPayload) -> None:
        """
        Create a farmer account with role "user".

        Raises:
            ValidationError: password and confirmation differ
            ConflictError: username already exists
            StorageError: database failure
        """
        if payload.password != payload.passwordConfirmation:
            raise ValidationError("Passwords do not match.")

        with storage_guard(self.db, "Registration failed."):
            if self.users.username_taken(payload.username):
                raise ConflictError("Username already exists.")

            user = self.users.create(
                fullname=payload.fullname,
                phone=payload.phone,
                username=payload.username,
                password_hash=get_password_hash(payload.password, rounds=self.bcrypt_rounds),
                role=ROLE_USER,
            )
            self.db.commit()

        logger.info("User registered", extra={"user_id": str(user.id)})

    def login(self, payload: LoginPayload) -> dict:
        """
        Authenticate by username or phone.

        Returns:
            The user's public fields (no password)

        Raises:
            AuthError: unknown identifier or wrong password
        """
        with storage_guard(self.db, "Login failed."):
            user = self.users.find_by_login(payload.username)

        if user is None or not verify_password(payload.password, user.password):
            raise AuthError(INVALID_CREDENTIALS)

        return user.to_public_dict()
