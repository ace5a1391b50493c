"""Configuration management for the registryctl application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """Application configuration with sensible defaults."""

    # Kubernetes objects
    NAMESPACE: str = os.getenv("REGISTRY_NAMESPACE", "container-registry")
    SERVICE_NAME: str = os.getenv("REGISTRY_SERVICE_NAME", "container-registry-public")
    INGRESS_NAME: str = os.getenv("REGISTRY_INGRESS_NAME", "container-registry-ingress")
    INGRESS_BACKEND: str = os.getenv("REGISTRY_INGRESS_BACKEND", "docker-registry-public")
    INGRESS_CLASS: str = os.getenv("REGISTRY_INGRESS_CLASS", "nginx")
    PROXY_BODY_SIZE: str = os.getenv("REGISTRY_PROXY_BODY_SIZE", "5g")
    TLS_SECRET: str = os.getenv("REGISTRY_TLS_SECRET", "registry-tls-secret")
    PORT: int = int(os.getenv("REGISTRY_PORT", "5000"))
    APP_LABEL: str = os.getenv("REGISTRY_APP_LABEL", "docker-registry")

    # Helm chart
    CHART_REPO_NAME: str = os.getenv("REGISTRY_CHART_REPO_NAME", "stable")
    CHART_REPO_URL: str = os.getenv("REGISTRY_CHART_REPO_URL", "https://charts.helm.sh/stable")
    CHART_NAME: str = os.getenv("REGISTRY_CHART_NAME", "docker-registry")

    # External binaries
    KUBECTL_BIN: str = os.getenv("KUBECTL_BIN", "kubectl")
    HELM_BIN: str = os.getenv("HELM_BIN", "helm")

    # Where rendered manifests are written
    OUTPUT_DIR: str = os.getenv("REGISTRY_OUTPUT_DIR", ".")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # API
    API_KEY: str = os.getenv("REGISTRYCTL_API_KEY", "registryctl-secret")
