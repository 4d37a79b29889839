"""Login / signup page."""
import logging
from typing import Any, Optional

from pydantic import ValidationError

from eventhub.exceptions import StorageError
from eventhub.schemas.forms import form_errors
from eventhub.schemas.pages import AuthResult
from eventhub.schemas.user import LoginForm, SignupForm
from eventhub.services.identity_store import IdentityStore

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT = "/profile"
GENERIC_ERROR = "Something went wrong. Please try again."


def is_valid_redirect_url(url: str) -> bool:
    """Only same-site paths; "//host" would be protocol-relative."""
    return url.startswith("/") and not url.startswith("//")


def resolve_redirect(next_url: Optional[str]) -> str:
    if next_url and is_valid_redirect_url(next_url):
        return next_url
    return DEFAULT_REDIRECT


def auth_page(identity_store: IdentityStore, next_url: Optional[str] = None) -> AuthResult:
    """Send already signed-in visitors straight on."""
    if identity_store.is_authenticated:
        return AuthResult(success=True, redirect_to=resolve_redirect(next_url))
    return AuthResult(success=False)


def submit_login(identity_store: IdentityStore, form_data: dict[str, Any], next_url: Optional[str] = None) -> AuthResult:
    try:
        form = LoginForm.model_validate(form_data)
    except ValidationError as exc:
        return AuthResult(success=False, errors=form_errors(exc))

    try:
        ok = identity_store.login(form.email, form.password)
    except StorageError:
        logger.exception("Could not persist login")
        return AuthResult(success=False, errors={"general": GENERIC_ERROR})
    if not ok:
        return AuthResult(success=False, errors={"general": "Invalid credentials"})
    return AuthResult(success=True, redirect_to=resolve_redirect(next_url))


def submit_signup(identity_store: IdentityStore, form_data: dict[str, Any], next_url: Optional[str] = None) -> AuthResult:
    try:
        form = SignupForm.model_validate(form_data)
    except ValidationError as exc:
        return AuthResult(success=False, errors=form_errors(exc))

    try:
        ok = identity_store.signup(form.name, form.email, form.password)
    except StorageError:
        logger.exception("Could not persist signup")
        return AuthResult(success=False, errors={"general": GENERIC_ERROR})
    if not ok:
        return AuthResult(success=False, errors={"general": "Failed to create account"})
    return AuthResult(success=True, redirect_to=resolve_redirect(next_url))


def logout(identity_store: IdentityStore) -> str:
    """Sign out and return the path to show next."""
    identity_store.logout()
    return "/"
