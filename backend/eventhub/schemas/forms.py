"""Shared helpers for the view-layer forms."""
import re
from typing import Optional

from pydantic import ValidationError

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.search(value))


def require(value: str, message: str) -> str:
    """Return ``value`` unchanged, or raise ``message`` if it is blank."""
    if not value:
        raise ValueError(message)
    return value


def form_errors(exc: ValidationError) -> dict[str, str]:
    """Flatten a ValidationError into ``{field: message}``, first error per field."""
    errors: dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "general"
        if field in errors:
            continue
        errors[field] = _message(err)
    return errors


def _message(err: dict) -> str:
    if err["type"] == "value_error":
        cause: Optional[Exception] = err.get("ctx", {}).get("error")
        if cause is not None:
            return str(cause)
    return err["msg"]
