"""Render and write the Kubernetes manifests for the registry.

Documents are built as plain dicts and serialized with ``yaml.safe_dump`` so
operator-supplied values are always quoted as needed instead of being pasted
into YAML text.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..utils import ManifestWriteError
from .models import (
    INGRESS_MANIFEST,
    NAMESPACE_MANIFEST,
    SERVICE_MANIFEST,
    Manifest,
    RegistryRequest,
    RegistrySettings,
)

logger = logging.getLogger("registryctl.manifests")


def dump_manifest(doc: Dict[str, Any]) -> str:
    return yaml.safe_dump(doc, sort_keys=False, default_flow_style=False)


def namespace_doc(settings: RegistrySettings) -> Dict[str, Any]:
    return {
        "apiVersion": "v1",
        "kind": "Namespace",
        "metadata": {"name": settings.namespace},
    }


def service_doc(settings: RegistrySettings) -> Dict[str, Any]:
    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {
            "name": settings.service_name,
            "namespace": settings.namespace,
        },
        "spec": {
            "ports": [{"port": settings.port, "targetPort": settings.port}],
            "selector": {"app": settings.app_label},
        },
    }


def ingress_doc(domain: str, settings: RegistrySettings) -> Dict[str, Any]:
    return {
        "apiVersion": "networking.k8s.io/v1",
        "kind": "Ingress",
        "metadata": {
            "name": settings.ingress_name,
            "namespace": settings.namespace,
            "annotations": {
                "kubernetes.io/ingress.class": settings.ingress_class,
                "nginx.ingress.kubernetes.io/proxy-body-size": settings.proxy_body_size,
            },
        },
        "spec": {
            "rules": [
                {
                    "host": domain,
                    "http": {
                        "paths": [
                            {
                                "backend": {
                                    "service": {
                                        "name": settings.ingress_backend,
                                        "port": {"number": settings.port},
                                    }
                                },
                                "path": "/",
                                "pathType": "Prefix",
                            }
                        ]
                    },
                }
            ],
            "tls": [
                {
                    "hosts": [domain],
                    "secretName": settings.tls_secret,
                }
            ],
        },
    }


def render_namespace(settings: RegistrySettings) -> str:
    return dump_manifest(namespace_doc(settings))


def render_service(settings: RegistrySettings) -> str:
    return dump_manifest(service_doc(settings))


def render_ingress(domain: str, settings: RegistrySettings) -> str:
    return dump_manifest(ingress_doc(domain, settings))


def render_manifests(request: RegistryRequest, settings: RegistrySettings) -> Dict[str, Manifest]:
    """Render all three manifests, keyed by kind, in apply order."""
    return {
        "Service": Manifest("Service", SERVICE_MANIFEST, render_service(settings)),
        "Namespace": Manifest("Namespace", NAMESPACE_MANIFEST, render_namespace(settings)),
        "Ingress": Manifest("Ingress", INGRESS_MANIFEST, render_ingress(request.domain, settings)),
    }


def write_manifest(manifest: Manifest, output_dir: Optional[Path] = None) -> Path:
    """Write ``manifest`` into ``output_dir``, replacing any existing file.

    Raises:
        ManifestWriteError: If the file cannot be written.
    """
    path = Path(output_dir or ".") / manifest.filename
    try:
        with open(path, "w") as f:
            f.write(manifest.body)
    except OSError as e:
        raise ManifestWriteError(
            f"failed to write the {manifest.kind.lower()} manifest to {path}: {e}",
            step=f"write {manifest.filename}",
        ) from e
    logger.info(f"📄 Wrote {manifest.kind} manifest to {path}")
    return path


def write_manifests(manifests: Dict[str, Manifest], output_dir: Optional[Path] = None) -> Dict[str, Path]:
    """Write every manifest and return the paths, keyed like ``manifests``."""
    return {kind: write_manifest(m, output_dir) for kind, m in manifests.items()}


def manifest_paths(paths: Dict[str, Path]) -> List[Path]:
    """Paths in apply order: service, namespace, ingress."""
    return [paths["Service"], paths["Namespace"], paths["Ingress"]]
