import typer

from ..modules.manifests import render_manifests, write_manifests
from ..modules.models import RegistrySettings
from ..modules.prompt import collect_request
from ..utils import RegistryError


def render_cmd(
    name: str = typer.Option(None, '--name', '-n', help='Helm release name (prompted if omitted)'),
    domain: str = typer.Option(None, '--domain', help='Ingress host (prompted if omitted)'),
    output_dir: str = typer.Option(None, '--output-dir', '-o', help='Directory for rendered manifests'),
    stdout: bool = typer.Option(False, '--stdout', help='Print manifests instead of writing files'),
):
    """Render the registry manifests without touching the cluster."""
    try:
        request = collect_request(name, domain)
        settings = RegistrySettings.from_config(output_dir=output_dir)
        manifests = render_manifests(request, settings)
        if stdout:
            typer.echo("---\n".join(m.body for m in manifests.values()), nl=False)
            return
        paths = write_manifests(manifests, settings.output_dir)
    except RegistryError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)

    for path in paths.values():
        typer.echo(f"✅ {path}")
