import json

import typer

from ..modules import doctor
from ..modules.models import RegistrySettings


def doctor_cmd():
    """Check kubeconfig and the kubectl/helm binaries before installing."""
    result = doctor.run(RegistrySettings.from_config())
    typer.echo(json.dumps(result, indent=2))
    if result["binaries"]["status"] != "ok":
        raise typer.Exit(code=1)
