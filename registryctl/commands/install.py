"""Registry installation command.

Prompts for a registry name and domain, writes the manifests, applies them
with kubectl and installs the docker-registry chart with Helm.
"""

import typer

from ..modules.models import RegistrySettings
from ..modules.pipeline import provision_registry
from ..modules.prompt import collect_request
from ..utils import RegistryError

SUCCESS_MESSAGE = "Registry installed successfully"


def install_cmd(
    name: str = typer.Option(None, '--name', '-n', help='Helm release name (prompted if omitted)'),
    domain: str = typer.Option(None, '--domain', help='Ingress host (prompted if omitted)'),
    output_dir: str = typer.Option(None, '--output-dir', '-o', help='Directory for rendered manifests'),
    dry_run: bool = typer.Option(False, '--dry-run', help='Write manifests but only log the commands'),
):
    """Provision the registry namespace, service, ingress and Helm release.

    Example:
        registryctl install --name my-registry --domain registry.example.com
    """
    try:
        request = collect_request(name, domain)
        settings = RegistrySettings.from_config(output_dir=output_dir)
        _, report = provision_registry(request, settings, dry_run=dry_run)
    except RegistryError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)

    if not report.success:
        for failed in report.failed:
            typer.echo(f"❌ Step failed: {failed.step.name} (exit code: {failed.returncode})", err=True)
            if failed.stderr:
                typer.echo(failed.stderr.rstrip(), err=True)
        completed = ", ".join(report.completed) or "none"
        typer.echo(f"Completed steps: {completed}", err=True)
        raise typer.Exit(code=1)

    if dry_run:
        typer.echo("Dry run complete, no commands were executed")
        return
    typer.echo(SUCCESS_MESSAGE)
