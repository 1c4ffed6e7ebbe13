"""Registration, login and token refresh orchestration."""

from __future__ import annotations

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.errors import (
    AccountDeactivated,
    DuplicateEmail,
    InvalidCredentials,
    InvalidToken,
    InvalidTokenType,
    MissingCustomerFields,
)
from ..core.passwords import hash_password, verify_password
from ..core.tokens import TokenCodec, TokenPair
from ..db import transaction
from ..models import Customer, Role, User
from ..schemas.auth import RegisterRequest
from .metrics import login_attempts_total, token_refreshes_total
from .queries import ensure_unique

LOGGER = structlog.get_logger(__name__)


class AccountService:
    """Owns the boundary between plaintext credentials and stored accounts."""

    def __init__(self, session: Session, codec: TokenCodec) -> None:
        self.session = session
        self.codec = codec

    def _find_by_email(self, email: str) -> User | None:
        return self.session.scalars(select(User).where(User.email == email)).one_or_none()

    def register(self, payload: RegisterRequest) -> User:
        """Create an account, plus its customer record for customer accounts.

        Both rows are written in one transaction; any failure leaves neither
        persisted.
        """

        if self._find_by_email(payload.email) is not None:
            raise DuplicateEmail()

        role = payload.role or Role.CUSTOMER
        if role is Role.CUSTOMER and not (payload.phone and payload.address):
            raise MissingCustomerFields()

        password_hash = hash_password(payload.password)

        try:
            with transaction(self.session):
                user = User(
                    name=payload.name,
                    email=payload.email,
                    password_hash=password_hash,
                    role=role,
                    is_active=True,
                )
                self.session.add(user)
                if role is Role.CUSTOMER:
                    ensure_unique(
                        self.session,
                        Customer.email,
                        payload.email,
                        "Customer with this email already exists",
                    )
                    ensure_unique(
                        self.session,
                        Customer.phone,
                        payload.phone,
                        "Customer with this phone already exists",
                    )
                    self.session.add(
                        Customer(
                            name=payload.name,
                            email=payload.email,
                            phone=payload.phone,
                            address=payload.address,
                        )
                    )
                self.session.flush()
        except IntegrityError as exc:
            LOGGER.warning("account_register_conflict", email=payload.email)
            raise DuplicateEmail() from exc

        LOGGER.info("account_registered", account_id=user.id, role=user.role.value)
        return user

    def login(self, email: str, password: str) -> tuple[TokenPair, User]:
        """Verify credentials and mint a token pair.

        Unknown emails and wrong passwords raise the same error.
        """

        user = self._find_by_email(email)
        if user is None or user.is_deleted or not verify_password(user.password_hash, password):
            login_attempts_total.labels(outcome="invalid_credentials").inc()
            LOGGER.info("login_failed")
            raise InvalidCredentials()
        if not user.is_active:
            login_attempts_total.labels(outcome="deactivated").inc()
            LOGGER.info("login_rejected_inactive", account_id=user.id)
            raise AccountDeactivated()

        login_attempts_total.labels(outcome="success").inc()
        LOGGER.info("login_succeeded", account_id=user.id)
        return self.codec.issue(user), user

    def refresh(self, refresh_token: str) -> TokenPair:
        """Exchange a valid refresh token for a brand-new pair."""

        try:
            claims = self.codec.validate(refresh_token)
        except InvalidToken:
            token_refreshes_total.labels(outcome="invalid_token").inc()
            raise
        if not claims.is_refresh:
            token_refreshes_total.labels(outcome="wrong_type").inc()
            LOGGER.info("refresh_rejected", reason="token_type", account_id=claims.account_id)
            raise InvalidTokenType()

        user = self.session.get(User, claims.account_id)
        if user is None or user.is_deleted:
            token_refreshes_total.labels(outcome="unknown_account").inc()
            LOGGER.info("refresh_rejected", reason="unknown_account", account_id=claims.account_id)
            raise InvalidToken()
        if not user.is_active:
            token_refreshes_total.labels(outcome="deactivated").inc()
            raise AccountDeactivated()

        token_refreshes_total.labels(outcome="success").inc()
        return self.codec.issue(user)


__all__ = ["AccountService"]
