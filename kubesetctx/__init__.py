"""Kubeconfig assembly for CI/CD actions."""

__version__ = "0.1.0"
