from typing import List

from .models import RegistryRequest, RegistrySettings, Step


def repo_add_step(settings: RegistrySettings) -> Step:
    return Step(
        name="helm repo add",
        args=[settings.helm_bin, "repo", "add", settings.chart_repo_name, settings.chart_repo_url],
        description=f"Adding chart repository '{settings.chart_repo_name}'",
    )


def repo_update_step(settings: RegistrySettings) -> Step:
    return Step(
        name="helm repo update",
        args=[settings.helm_bin, "repo", "update"],
        description="Updating chart repositories",
    )


def install_step(request: RegistryRequest, settings: RegistrySettings) -> Step:
    return Step(
        name="helm install",
        args=[
            settings.helm_bin, "install", request.registry_name, settings.chart_ref,
            "--namespace", settings.namespace,
            "--set", f"podLabels.app={settings.app_label}",
        ],
        description=f"Installing release '{request.registry_name}' in namespace '{settings.namespace}'",
    )


def install_steps(request: RegistryRequest, settings: RegistrySettings) -> List[Step]:
    return [
        repo_add_step(settings),
        repo_update_step(settings),
        install_step(request, settings),
    ]
