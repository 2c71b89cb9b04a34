"""
Action flow: assemble the kubeconfig, pick the context, write it to the
runner's temp directory and point KUBECONFIG at it.
"""
import logging
import os
import time
from pathlib import Path
from typing import Optional

from ..config import Config
from ..utils import ClusterTypeError, KubeconfigError, redact_sensitive_data
from ..utils.inputs import get_input
from ..utils.kube import load_kubeconfig, use_context
from ..utils.workflow import export_variable
from .kubeconfig import get_default_kubeconfig

logger = logging.getLogger(__name__)

GENERIC = "generic"
ARC = "arc"


def get_kubeconfig() -> str:
    """Dispatch on the cluster-type input."""
    cluster_type = (get_input("cluster-type") or Config.DEFAULT_CLUSTER_TYPE).lower()
    if cluster_type == GENERIC:
        return get_default_kubeconfig()
    if cluster_type == ARC:
        raise ClusterTypeError("Cluster type 'arc' is not supported by this action")
    raise ClusterTypeError(f"Invalid cluster type: '{cluster_type}'")


def set_context(kubeconfig: str, context: Optional[str] = None) -> str:
    """Switch the current context when the context input asks for one."""
    if context is None:
        context = get_input("context")
    if not context:
        logger.debug("No context specified, keeping current-context")
        return kubeconfig
    logger.debug(f"Setting current-context to {context}")
    return use_context(kubeconfig, context)


def write_kubeconfig(kubeconfig: str, directory: Optional[str] = None) -> Path:
    """Write the kubeconfig to a fresh file readable only by the owner."""
    directory = Path(directory or Config.runner_temp())
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{Config.KUBECONFIG_FILE_PREFIX}{int(time.time() * 1000)}"

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(kubeconfig)
    os.chmod(path, 0o600)
    return path


def log_kubeconfig(kubeconfig: str) -> None:
    try:
        data = load_kubeconfig(kubeconfig)
    except KubeconfigError as e:
        logger.debug(f"Kubeconfig is not structured, not displaying it: {e}")
        return
    logger.debug(f"Kubeconfig: {redact_sensitive_data(data)}")


def run() -> Path:
    """Run the action end to end and return the written kubeconfig path."""
    kubeconfig = set_context(get_kubeconfig())

    if logger.isEnabledFor(logging.DEBUG):
        log_kubeconfig(kubeconfig)

    path = write_kubeconfig(kubeconfig)
    logger.info(f"Kubeconfig written to {path}")
    export_variable("KUBECONFIG", str(path))
    return path
