"""Logging configuration for the kubesetctx package."""
import logging
import sys

from .config import Config
from .utils.workflow import format_command

# Log levels that have a matching workflow command
WORKFLOW_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class WorkflowCommandFormatter(logging.Formatter):
    """Render records as workflow commands so the runner can annotate them."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = WORKFLOW_COMMANDS.get(record.levelno)
        if command is None:
            return message
        return format_command(command, message)


def build_formatter() -> logging.Formatter:
    if Config.in_actions():
        return WorkflowCommandFormatter("%(message)s")
    return logging.Formatter(Config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')


def setup_logging(debug_mode: bool = False) -> None:
    """Configure root logging based on debug mode."""
    log_level = logging.DEBUG if debug_mode else Config.log_level()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())
    logging.basicConfig(level=log_level, handlers=[handler], force=True)
    # Disable debug logging for noisy libraries
    if not debug_mode:
        logging.getLogger('urllib3').setLevel(logging.WARNING)
        logging.getLogger('kubernetes').setLevel(logging.WARNING)
