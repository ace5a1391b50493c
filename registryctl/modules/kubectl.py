from pathlib import Path
from typing import List

from .models import RegistrySettings, Step


def apply_step(path: Path, settings: RegistrySettings) -> Step:
    return Step(
        name=f"apply {Path(path).name}",
        args=[settings.kubectl_bin, "apply", "-f", str(path)],
        description=f"Applying {path}",
    )


def apply_steps(paths: List[Path], settings: RegistrySettings) -> List[Step]:
    """One ``kubectl apply -f`` per manifest, in the order given.

    Callers pass service, namespace, ingress. The service is applied before
    its namespace exists, so on a fresh cluster the first apply fails and
    succeeds on the next run.
    """
    return [apply_step(p, settings) for p in paths]
