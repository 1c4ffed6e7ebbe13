"""Unit tests for the account service."""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from dashboard_ac.backend.src.core.errors import (
    AccountDeactivated,
    ConflictError,
    DuplicateEmail,
    InvalidCredentials,
    InvalidToken,
    InvalidTokenType,
    MissingCustomerFields,
)
from dashboard_ac.backend.src.core.passwords import verify_password
from dashboard_ac.backend.src.core.security import get_token_codec
from dashboard_ac.backend.src.db import session_scope
from dashboard_ac.backend.src.models import Customer, Role, User
from dashboard_ac.backend.src.schemas.auth import RegisterRequest
from dashboard_ac.backend.src.services.accounts import AccountService


def _register(**overrides: object) -> User:
    payload = {
        "name": "Budi Santoso",
        "email": "budi@example.com",
        "password": "secret123",
        "phone": "081234567890",
        "address": "Jl. Sudirman No. 10, Jakarta",
    }
    payload.update(overrides)
    with session_scope() as session:
        return AccountService(session, get_token_codec()).register(RegisterRequest(**payload))


def _count(model: type) -> int:
    with session_scope() as session:
        return session.scalar(select(func.count()).select_from(model))


def test_register_customer_creates_account_and_customer() -> None:
    user = _register()

    assert user.role is Role.CUSTOMER
    assert user.is_active is True
    assert user.password_hash != "secret123"
    assert verify_password(user.password_hash, "secret123")
    with session_scope() as session:
        customer = session.scalars(
            select(Customer).where(Customer.email == "budi@example.com")
        ).one()
        assert customer.phone == "081234567890"
        assert customer.name == "Budi Santoso"


def test_register_technician_skips_customer_record() -> None:
    user = _register(email="tech@example.com", role=Role.TECHNICIAN, phone=None, address=None)

    assert user.role is Role.TECHNICIAN
    assert _count(Customer) == 0


def test_register_customer_requires_phone_and_address() -> None:
    with pytest.raises(MissingCustomerFields):
        _register(phone=None)

    assert _count(User) == 0


def test_register_duplicate_email_is_rejected() -> None:
    _register()

    with pytest.raises(DuplicateEmail) as excinfo:
        _register(name="Someone Else", phone="089999999999")
    assert excinfo.value.detail == "User with this email already exists"
    assert _count(User) == 1


def test_failed_customer_insert_leaves_no_account() -> None:
    _register()

    with pytest.raises(ConflictError):
        _register(email="other@example.com")

    assert _count(User) == 1
    assert _count(Customer) == 1


def test_login_returns_token_pair() -> None:
    _register()

    with session_scope() as session:
        tokens, user = AccountService(session, get_token_codec()).login(
            "budi@example.com", "secret123"
        )

    claims = get_token_codec().validate(tokens.access_token)
    assert claims.account_id == user.id
    assert claims.role is Role.CUSTOMER


def test_login_errors_are_indistinguishable() -> None:
    _register()

    with session_scope() as session:
        accounts = AccountService(session, get_token_codec())
        with pytest.raises(InvalidCredentials) as unknown:
            accounts.login("nobody@example.com", "secret123")
        with pytest.raises(InvalidCredentials) as wrong:
            accounts.login("budi@example.com", "wrong-password")

    assert unknown.value.status_code == wrong.value.status_code == 401
    assert unknown.value.detail == wrong.value.detail == "Invalid email or password"


def test_login_rejects_deactivated_account(make_user) -> None:  # type: ignore[no-untyped-def]
    make_user("inactive@example.com", Role.TECHNICIAN, is_active=False)

    with session_scope() as session:
        accounts = AccountService(session, get_token_codec())
        with pytest.raises(AccountDeactivated):
            accounts.login("inactive@example.com", "secret123")
        with pytest.raises(InvalidCredentials):
            accounts.login("inactive@example.com", "wrong-password")


def test_refresh_issues_new_pair(make_user) -> None:  # type: ignore[no-untyped-def]
    user = make_user("tech@example.com", Role.TECHNICIAN)
    tokens = get_token_codec().issue(user)

    with session_scope() as session:
        renewed = AccountService(session, get_token_codec()).refresh(tokens.refresh_token)

    claims = get_token_codec().validate(renewed.access_token)
    assert claims.is_access
    assert claims.account_id == user.id


def test_refresh_rejects_access_token(make_user) -> None:  # type: ignore[no-untyped-def]
    user = make_user("tech@example.com", Role.TECHNICIAN)
    tokens = get_token_codec().issue(user)

    with session_scope() as session:
        with pytest.raises(InvalidTokenType):
            AccountService(session, get_token_codec()).refresh(tokens.access_token)


def test_refresh_rejects_deactivated_or_deleted_accounts(make_user) -> None:  # type: ignore[no-untyped-def]
    inactive = make_user("inactive@example.com", Role.TECHNICIAN)
    deleted = make_user("deleted@example.com", Role.TECHNICIAN)
    codec = get_token_codec()
    inactive_tokens = codec.issue(inactive)
    deleted_tokens = codec.issue(deleted)

    with session_scope() as session:
        session.get(User, inactive.id).is_active = False
        session.get(User, deleted.id).soft_delete()

    with session_scope() as session:
        accounts = AccountService(session, codec)
        with pytest.raises(AccountDeactivated):
            accounts.refresh(inactive_tokens.refresh_token)
        with pytest.raises(InvalidToken):
            accounts.refresh(deleted_tokens.refresh_token)
