"""Account Store — signup/login semantics and session side effects.

Tests cover:
    - Case-insensitive email uniqueness
    - Generic, identical login failure messages
    - Secrets never stored or returned in clear text
    - Admin login against the single configured credential
    - Over-long secrets refused, failed writes leave no account behind
"""

import pytest

from marketplace.core.errors import StorageError
from marketplace.core.storage_protocols import CURRENT_USER_KEY, USERS_KEY
from marketplace.services.account_store import (
    DUPLICATE_EMAIL_MESSAGE, INVALID_CREDENTIALS_MESSAGE, SECRET_TOO_LONG_MESSAGE,
    AccountStore,
)
from marketplace.services.session_state import SessionState


def test_signup_creates_account_and_session(accounts):
    result = accounts.signup("a@x.com", "pw1", "12345", "BUE")
    assert result.success
    assert result.user["email"] == "a@x.com"
    assert result.user["postal_code"] == "12345"
    assert accounts.get_current_user() == result.user


def test_signup_rejects_email_differing_only_in_case(accounts, storage):
    assert accounts.signup("a@x.com", "pw1", "12345", "BUE").success
    second = accounts.signup("A@X.com", "pw2", "54321", "AUC")
    assert second.success is False
    assert second.message == DUPLICATE_EMAIL_MESSAGE
    assert second.user is None
    assert len(storage.read(USERS_KEY)) == 1


def test_signup_stores_email_lowercased(accounts):
    result = accounts.signup("Mixed@Case.COM", "pw1", "12345", "GUC")
    assert result.user["email"] == "mixed@case.com"


def test_secret_is_never_stored_or_returned_in_clear(accounts, storage):
    result = accounts.signup("a@x.com", "super-secret", "12345", "BUE")
    assert "secret_hash" not in result.user
    assert "super-secret" not in str(result.user)
    stored = storage.read(USERS_KEY)
    assert stored[0]["secret_hash"] != "super-secret"
    assert "super-secret" not in str(stored)


def test_login_with_correct_credentials(accounts):
    accounts.signup("a@x.com", "pw1", "12345", "BUE")
    accounts.logout_user()
    result = accounts.login("A@x.COM", "pw1")
    assert result.success
    assert result.user["email"] == "a@x.com"
    assert "secret_hash" not in result.user
    assert accounts.get_current_user()["email"] == "a@x.com"


def test_login_failure_is_identical_for_unknown_email_and_wrong_secret(accounts):
    accounts.signup("a@x.com", "pw1", "12345", "BUE")
    accounts.logout_user()
    unknown = accounts.login("nobody@x.com", "pw1")
    wrong = accounts.login("a@x.com", "wrong")
    assert unknown.success is False
    assert wrong.success is False
    assert unknown.message == wrong.message == INVALID_CREDENTIALS_MESSAGE
    assert accounts.get_current_user() is None


def test_login_secret_match_is_exact(accounts):
    accounts.signup("a@x.com", "Secret", "12345", "BUE")
    assert not accounts.login("a@x.com", "secret").success


def test_accounts_reload_from_storage(storage, accounts):
    accounts.signup("a@x.com", "pw1", "12345", "BUE")
    reloaded = AccountStore(
        storage, SessionState(storage), "admin", "admin123", hash_rounds=4,
    )
    assert reloaded.login("a@x.com", "pw1").success
    assert not reloaded.signup("A@X.COM", "pw2", "1", "AUC").success


def test_admin_login_success(accounts, settings):
    admin = accounts.admin_login(settings.admin_username, settings.admin_password)
    assert admin is not None
    assert admin.username == settings.admin_username
    assert admin.token
    assert accounts.get_admin() == admin
    assert accounts.is_admin_token(admin.token)


def test_admin_login_failure(accounts, settings):
    assert accounts.admin_login(settings.admin_username, "wrong") is None
    assert accounts.admin_login("root", settings.admin_password) is None
    assert accounts.get_admin() is None


def test_admin_token_changes_per_login(accounts, settings):
    first = accounts.admin_login(settings.admin_username, settings.admin_password)
    second = accounts.admin_login(settings.admin_username, settings.admin_password)
    assert first.token != second.token
    assert not accounts.is_admin_token(first.token)
    assert accounts.is_admin_token(second.token)


def test_is_admin_token_without_session(accounts):
    assert not accounts.is_admin_token("anything")
    assert not accounts.is_admin_token(None)


def test_user_and_admin_sessions_are_independent(accounts, settings):
    accounts.signup("a@x.com", "pw1", "12345", "BUE")
    accounts.admin_login(settings.admin_username, settings.admin_password)

    accounts.logout_user()
    assert accounts.get_current_user() is None
    assert accounts.get_admin() is not None

    accounts.login("a@x.com", "pw1")
    accounts.logout_admin()
    assert accounts.get_admin() is None
    assert accounts.get_current_user() is not None


def test_signup_refuses_secret_over_bcrypt_limit(accounts, storage):
    result = accounts.signup("a@x.com", "x" * 100, "12345", "BUE")
    assert result.success is False
    assert result.message == SECRET_TOO_LONG_MESSAGE
    assert storage.read(USERS_KEY) in (None, [])
    assert accounts.get_current_user() is None


def test_secret_limit_counts_utf8_bytes(accounts):
    assert not accounts.signup("a@x.com", "é" * 40, "12345", "BUE").success
    result = accounts.signup("a@x.com", "é" * 36, "12345", "BUE")
    assert result.success
    accounts.logout_user()
    assert accounts.login("a@x.com", "é" * 36).success


def test_login_with_over_long_secret_fails_cleanly(accounts):
    accounts.signup("a@x.com", "pw1", "12345", "BUE")
    result = accounts.login("a@x.com", "x" * 100)
    assert result.success is False
    assert result.message == INVALID_CREDENTIALS_MESSAGE


def test_failed_signup_write_leaves_no_account(flaky_storage):
    store = AccountStore(
        flaky_storage, SessionState(flaky_storage), "admin", "admin123",
        hash_rounds=4,
    )
    flaky_storage.fail_writes = True
    with pytest.raises(StorageError):
        store.signup("a@x.com", "pw1", "12345", "BUE")
    assert flaky_storage.read(CURRENT_USER_KEY) is None
    assert store.get_current_user() is None

    flaky_storage.fail_writes = False
    assert store.signup("a@x.com", "pw1", "12345", "BUE").success
    assert len(flaky_storage.read(USERS_KEY)) == 1
