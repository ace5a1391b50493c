"""Provision a private container registry on Kubernetes."""

__version__ = "0.1.0"
