"""
Data models for registry provisioning.
"""
from dataclasses import dataclass, field, replace
from typing import Dict, List

from ..config import Config

SERVICE_MANIFEST = "service.yaml"
NAMESPACE_MANIFEST = "registry-namespace.yaml"
INGRESS_MANIFEST = "ingress-service.yaml"


@dataclass
class RegistryRequest:
    """Operator input for one provisioning run."""
    registry_name: str
    domain: str

    @classmethod
    def from_input(cls, registry_name: str, domain: str) -> "RegistryRequest":
        """Build a request from raw lines, trimming surrounding whitespace."""
        return cls(registry_name=registry_name.strip(), domain=domain.strip())


@dataclass
class RegistrySettings:
    """Everything about the registry that is not supplied by the operator.

    Defaults match a stock install: the ``container-registry`` namespace, a
    5000/TCP service, an nginx ingress terminating TLS with
    ``registry-tls-secret``, and the ``docker-registry`` chart from the
    ``stable`` repository.
    """
    namespace: str = "container-registry"
    service_name: str = "container-registry-public"
    ingress_name: str = "container-registry-ingress"
    # Service the ingress routes to; the chart creates it, not this tool.
    ingress_backend: str = "docker-registry-public"
    ingress_class: str = "nginx"
    proxy_body_size: str = "5g"
    tls_secret: str = "registry-tls-secret"
    port: int = 5000
    app_label: str = "docker-registry"
    chart_repo_name: str = "stable"
    chart_repo_url: str = "https://charts.helm.sh/stable"
    chart_name: str = "docker-registry"
    kubectl_bin: str = "kubectl"
    helm_bin: str = "helm"
    output_dir: str = "."

    @classmethod
    def from_config(cls, **overrides) -> "RegistrySettings":
        """Build settings from ``Config``; keyword overrides win when not None.

        Raises:
            TypeError: If an override does not name a settings field.
        """
        settings = cls(
            namespace=Config.NAMESPACE,
            service_name=Config.SERVICE_NAME,
            ingress_name=Config.INGRESS_NAME,
            ingress_backend=Config.INGRESS_BACKEND,
            ingress_class=Config.INGRESS_CLASS,
            proxy_body_size=Config.PROXY_BODY_SIZE,
            tls_secret=Config.TLS_SECRET,
            port=Config.PORT,
            app_label=Config.APP_LABEL,
            chart_repo_name=Config.CHART_REPO_NAME,
            chart_repo_url=Config.CHART_REPO_URL,
            chart_name=Config.CHART_NAME,
            kubectl_bin=Config.KUBECTL_BIN,
            helm_bin=Config.HELM_BIN,
            output_dir=Config.OUTPUT_DIR,
        )
        return replace(settings, **{k: v for k, v in overrides.items() if v is not None})

    @property
    def chart_ref(self) -> str:
        return f"{self.chart_repo_name}/{self.chart_name}"


@dataclass
class Manifest:
    """A rendered Kubernetes manifest and the file it is written to."""
    kind: str
    filename: str
    body: str


@dataclass
class Step:
    """One external command in the provisioning pipeline."""
    name: str
    args: List[str]
    description: str = ""


@dataclass
class StepResult:
    """Outcome of running a single step."""
    step: Step
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class PipelineReport:
    """Ordered results of a pipeline run.

    Every step is attempted; a non-zero exit is recorded and the run moves
    on, so a later step can still succeed after an earlier one failed.
    """
    results: List[StepResult] = field(default_factory=list)
    total: int = 0

    @property
    def completed(self) -> List[str]:
        return [r.step.name for r in self.results if r.ok]

    @property
    def failed(self) -> List[StepResult]:
        return [r for r in self.results if not r.ok]

    @property
    def success(self) -> bool:
        return not self.failed and len(self.results) == self.total

    def to_dict(self) -> Dict[str, object]:
        return {
            "success": self.success,
            "completed": self.completed,
            "failed": [
                {
                    "step": r.step.name,
                    "command": r.step.args,
                    "returncode": r.returncode,
                    "stderr": r.stderr,
                }
                for r in self.failed
            ],
            "steps": [
                {
                    "step": r.step.name,
                    "command": r.step.args,
                    "returncode": r.returncode,
                    "stdout": r.stdout,
                }
                for r in self.results
            ],
        }
