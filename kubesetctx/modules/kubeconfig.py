"""
Kubeconfig assembly for generic clusters.

Two ways of getting credentials are supported: a kubeconfig handed in by the
caller, or a cluster URL plus a service-account token Secret.
"""
import logging
from enum import Enum
from typing import Optional

from ..config import Config
from ..utils import InputError, InputRequiredError, decode_base64
from ..utils.inputs import get_input
from ..utils.kube import dump_kubeconfig
from ..utils.workflow import set_secret
from .secret import parse_k8s_secret

logger = logging.getLogger(__name__)

CLUSTER_NAME = "default"
USER_NAME = "default-user"
CONTEXT_NAME = "loaded-context"

ENCODINGS = ("plaintext", "base64")


class Method(str, Enum):
    DEFAULT = "default"
    SERVICE_ACCOUNT = "service-account"
    SERVICE_PRINCIPAL = "service-principal"


def parse_method(method: str) -> Optional[Method]:
    """Map a method name to ``Method``; unknown names give None."""
    try:
        return Method(method.lower())
    except ValueError:
        return None


def create_kubeconfig(cert_auth: str, token: str, cluster_url: str) -> str:
    """Build a single-cluster kubeconfig authenticating with a bearer token."""
    kubeconfig = {
        "apiVersion": "v1",
        "kind": "Config",
        "clusters": [
            {
                "name": CLUSTER_NAME,
                "cluster": {
                    "server": cluster_url,
                    "certificate-authority-data": cert_auth,
                    "insecure-skip-tls-verify": False,
                },
            }
        ],
        "users": [{"name": USER_NAME, "user": {"token": token}}],
        "contexts": [
            {
                "name": CONTEXT_NAME,
                "context": {
                    "cluster": CLUSTER_NAME,
                    "user": USER_NAME,
                    "name": CONTEXT_NAME,
                },
            }
        ],
        "preferences": {},
        "current-context": CONTEXT_NAME,
    }
    return dump_kubeconfig(kubeconfig)


def decode_kubeconfig(kubeconfig: str, encoding: str) -> str:
    encoding = (encoding or Config.DEFAULT_KUBECONFIG_ENCODING).lower()
    if encoding not in ENCODINGS:
        raise InputError(
            f"Invalid kubeconfig-encoding: '{encoding}'. Must be 'plaintext' or 'base64'."
        )
    if encoding == "base64":
        return decode_base64(kubeconfig, "kubeconfig")
    return kubeconfig


def service_account_kubeconfig(cluster_url: str, k8s_secret: str) -> str:
    secret = parse_k8s_secret(k8s_secret)
    token = secret.token
    set_secret(token)
    set_secret(secret.ca_cert)
    return create_kubeconfig(secret.ca_cert, token, cluster_url)


def build_kubeconfig(
    method: Optional[Method],
    kubeconfig: str = "",
    encoding: str = "",
    cluster_url: str = "",
    k8s_secret: str = "",
) -> str:
    """
    Assemble a kubeconfig for ``method``.

    Args:
        method: Credential method, None is treated like ``Method.DEFAULT``
        kubeconfig: Caller supplied kubeconfig (default method)
        encoding: Encoding of ``kubeconfig``, plaintext or base64
        cluster_url: API server URL (service-account method)
        k8s_secret: Service-account token Secret manifest (service-account method)

    Returns:
        The kubeconfig text
    """
    if method == Method.SERVICE_ACCOUNT:
        if not cluster_url:
            raise InputRequiredError("k8s-url")
        logger.debug("Found clusterUrl. Creating kubeconfig using certificate and token")
        if not k8s_secret:
            raise InputRequiredError("k8s-secret")
        set_secret(k8s_secret)
        return service_account_kubeconfig(cluster_url, k8s_secret)

    if method == Method.SERVICE_PRINCIPAL:
        logger.warning("Service Principal method not supported for default cluster type")

    logger.debug("Setting context using kubeconfig")
    if not kubeconfig:
        raise InputRequiredError("kubeconfig")
    set_secret(kubeconfig)
    return decode_kubeconfig(kubeconfig, encoding)


def get_default_kubeconfig() -> str:
    """Assemble the kubeconfig described by the action's inputs."""
    return build_kubeconfig(
        parse_method(get_input("method", required=True)),
        kubeconfig=get_input("kubeconfig"),
        encoding=get_input("kubeconfig-encoding"),
        cluster_url=get_input("k8s-url"),
        k8s_secret=get_input("k8s-secret"),
    )
