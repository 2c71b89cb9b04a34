from . import action, kubeconfig

__all__ = ['action', 'kubeconfig']
