"""Helpers for talking to the CI runner through workflow commands.

The runner scans stdout for lines of the form ``::command key=value::message``
and reads exported variables from the file named by ``GITHUB_ENV``.
"""
import os
import sys
import uuid
from typing import Optional

from ..config import Config


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, message: str = "", **properties: str) -> str:
    """Build a single workflow command line."""
    line = f"::{command}"
    props = [f"{key}={escape_property(str(val))}" for key, val in properties.items() if val]
    if props:
        line += " " + ",".join(props)
    return f"{line}::{escape_data(str(message))}"


def issue_command(command: str, message: str = "", **properties: str) -> None:
    sys.stdout.write(format_command(command, message, **properties) + os.linesep)
    sys.stdout.flush()


def set_secret(value: Optional[str]) -> None:
    """Ask the runner to mask ``value`` in all further log output."""
    if value and Config.in_actions():
        issue_command("add-mask", value)


def export_variable(name: str, value: str) -> None:
    """Make ``name`` visible to this process and to later workflow steps."""
    os.environ[name] = value

    env_file = Config.github_env()
    if env_file:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            raise ValueError(f"Unexpected input: name or value contains the delimiter '{delimiter}'")
        with open(env_file, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}{os.linesep}{value}{os.linesep}{delimiter}{os.linesep}")
        return

    issue_command("set-env", value, name=name)


def set_failed(message: str) -> None:
    """Report a failure to the runner and exit with status 1."""
    issue_command("error", message)
    sys.exit(1)
