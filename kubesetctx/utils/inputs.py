"""Access to action inputs passed by the runner as ``INPUT_*`` variables."""
import os

from . import InputRequiredError


def input_variable(name: str) -> str:
    """Environment variable the runner uses for input ``name``."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, required: bool = False) -> str:
    """Return the trimmed value of input ``name``, or '' when unset."""
    value = os.environ.get(input_variable(name), "").strip()
    if required and not value:
        raise InputRequiredError(name)
    return value
