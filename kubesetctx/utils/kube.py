import json
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml
from kubernetes import config
from kubernetes.config.config_exception import ConfigException

from . import KubeconfigError

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class KubeconfigLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps (token expiries and the like) as text."""


KubeconfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def dump_kubeconfig(data: Dict[str, Any]) -> str:
    """Serialize a kubeconfig mapping as compact JSON, keeping key order."""
    return json.dumps(data, separators=(",", ":"))


def load_kubeconfig(content: str) -> Dict[str, Any]:
    """
    Parse kubeconfig text. JSON is accepted as well since it is valid YAML.
    """
    try:
        data = yaml.load(content, Loader=KubeconfigLoader)
    except yaml.YAMLError as e:
        raise KubeconfigError(f"Kubeconfig is not valid YAML or JSON: {e}") from e
    if not isinstance(data, dict):
        raise KubeconfigError("Kubeconfig must be a mapping")
    return data


def context_names(data: Dict[str, Any]) -> List[str]:
    return [ctx.get("name") for ctx in data.get("contexts") or [] if isinstance(ctx, dict)]


def use_context(content: str, context: str) -> str:
    """Return ``content`` re-serialized with ``current-context`` set to ``context``."""
    data = load_kubeconfig(content)
    if context not in context_names(data):
        raise KubeconfigError(f"Context '{context}' not found in kubeconfig")
    data["current-context"] = context
    return dump_kubeconfig(data)


def list_contexts(path: str) -> List[Dict[str, Any]]:
    """
    List the contexts of a kubeconfig file through the kubernetes client's
    loader. Nothing is sent to the cluster.
    """
    resolved = Path(os.path.expanduser(path)).resolve()
    if not resolved.exists():
        raise FileNotFoundError(f"Kubeconfig not found: {resolved}")
    data = load_kubeconfig(resolved.read_text(encoding="utf-8"))
    if data.get("current-context"):
        try:
            contexts, active = config.list_kube_config_contexts(config_file=str(resolved))
        except ConfigException as e:
            raise KubeconfigError(str(e)) from e
        active_name = active.get("name") if active else None
    else:
        # the client loader insists on an active context
        contexts = [ctx for ctx in data.get("contexts") or [] if isinstance(ctx, dict)]
        active_name = None
    return [
        {
            "name": ctx.get("name"),
            "cluster": (ctx.get("context") or {}).get("cluster"),
            "user": (ctx.get("context") or {}).get("user"),
            "current": ctx.get("name") == active_name,
        }
        for ctx in contexts
    ]
