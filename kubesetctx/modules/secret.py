"""
Parsing of the Kubernetes Secret manifest used by the service-account method.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict

import yaml

from ..utils import KubeconfigError, decode_base64

logger = logging.getLogger(__name__)

CA_CERT_KEY = "ca.crt"
TOKEN_KEY = "token"


@dataclass
class K8sSecret:
    """The parts of a service-account token Secret we care about."""
    data: Dict[str, str]
    kind: str = "Secret"
    metadata: Dict[str, str] = field(default_factory=dict)

    @property
    def ca_cert(self) -> str:
        """CA bundle, still base64 encoded as kubeconfig expects it."""
        return self.data[CA_CERT_KEY]

    @property
    def token(self) -> str:
        """Bearer token, decoded from the manifest's base64 form."""
        return decode_base64(self.data[TOKEN_KEY], TOKEN_KEY)


def parse_k8s_secret(content: str) -> K8sSecret:
    """Parse and validate a Secret manifest given as YAML or JSON text."""
    try:
        secret = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise KubeconfigError("K8s secret yaml is invalid") from e

    if not isinstance(secret, dict):
        raise KubeconfigError("K8s secret yaml is invalid")
    data = secret.get("data")
    if not data or not isinstance(data, dict):
        raise KubeconfigError("k8s secret yaml does not contain data field")
    if not data.get(CA_CERT_KEY):
        raise KubeconfigError("k8s secret yaml does not contain data.ca.crt field")
    if not data.get(TOKEN_KEY):
        raise KubeconfigError("k8s secret yaml does not contain data.token field")

    metadata = secret.get("metadata") or {}
    logger.debug(f"Parsed secret {metadata.get('name', '<unnamed>')}")
    return K8sSecret(
        data={k: str(v) for k, v in data.items()},
        kind=secret.get("kind", "Secret"),
        metadata=metadata,
    )
