"""Configuration management for the kubesetctx application."""
import os
import tempfile
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """Application configuration with sensible defaults.

    Values are read on access so that a runner (or a test) can change the
    environment after import.
    """

    # Logging
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Security
    REDACT_KEYS: tuple = ("token", "certificate-authority-data", "client-key-data", "password")

    # Input defaults
    DEFAULT_CLUSTER_TYPE: str = "generic"
    DEFAULT_KUBECONFIG_ENCODING: str = "plaintext"
    KUBECONFIG_FILE_PREFIX: str = "kubeconfig_"

    @classmethod
    def log_level(cls) -> str:
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def runner_temp(cls) -> str:
        """Directory the runner provides for per-job temporary files."""
        return os.getenv("RUNNER_TEMP") or tempfile.gettempdir()

    @classmethod
    def github_env(cls) -> str:
        return os.getenv("GITHUB_ENV", "")

    @classmethod
    def in_actions(cls) -> bool:
        return os.getenv("GITHUB_ACTIONS", "").lower() == "true"
