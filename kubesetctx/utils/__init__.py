"""Utility functions and helpers for the kubesetctx application."""
import base64
import binascii
from typing import Any

from ..config import Config


class SetContextError(ValueError):
    """Base class for errors raised while assembling a kubeconfig."""
    pass


class InputError(SetContextError):
    """An action input has an unusable value."""
    pass


class InputRequiredError(InputError):
    """A required action input was not supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")


class KubeconfigError(SetContextError):
    """A kubeconfig or secret manifest could not be decoded."""
    pass


class ClusterTypeError(SetContextError):
    pass


def redact_sensitive_data(data: Any) -> Any:
    """Recursively redact sensitive data from dictionaries and lists.

    Args:
        data: Input data that might contain sensitive information

    Returns:
        Data with sensitive values redacted
    """
    if isinstance(data, dict):
        return {
            k: "[REDACTED]" if any(
                redact_key.lower() in k.lower()
                for redact_key in Config.REDACT_KEYS
            ) else redact_sensitive_data(v)
            for k, v in data.items()
        }
    elif isinstance(data, (list, tuple)):
        return [redact_sensitive_data(item) for item in data]
    return data


def decode_base64(value: str, what: str) -> str:
    """Decode base64 text to a UTF-8 string, tolerating missing padding."""
    value = "".join(value.split()).rstrip("=")
    value += "=" * (-len(value) % 4)
    try:
        return base64.b64decode(value, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise KubeconfigError(f"Could not decode {what} as base64: {e}") from e
