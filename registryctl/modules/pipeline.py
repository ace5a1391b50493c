"""Provisioning pipeline: render, write, apply, then install the chart."""
import logging
import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from ..utils import format_command, run_command
from . import helm, kubectl
from .manifests import manifest_paths, render_manifests, write_manifests
from .models import PipelineReport, RegistryRequest, RegistrySettings, Step, StepResult

logger = logging.getLogger("registryctl.pipeline")

Runner = Callable[[List[str]], subprocess.CompletedProcess]


def build_steps(
    request: RegistryRequest,
    settings: RegistrySettings,
    paths: Dict[str, Path],
) -> List[Step]:
    """The six external commands of a provisioning run, in execution order."""
    return (
        kubectl.apply_steps(manifest_paths(paths), settings)
        + helm.install_steps(request, settings)
    )


def run_pipeline(
    steps: List[Step],
    runner: Optional[Runner] = None,
    dry_run: bool = False,
) -> PipelineReport:
    """Run every step in order, recording each exit status.

    A non-zero exit does not stop the run: later steps may still succeed,
    e.g. the namespace apply after a service apply that needed it.

    Launch failures from the runner propagate as ``CommandLaunchError``.
    """
    runner = runner or run_command
    report = PipelineReport(total=len(steps))

    for step in steps:
        logger.info(f"🚀 {step.description or step.name}")
        if dry_run:
            logger.info(f"🧪 (dry-run) {format_command(step.args)}")
            report.results.append(StepResult(step=step, returncode=0))
            continue

        completed = runner(step.args)
        result = StepResult(
            step=step,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        report.results.append(result)

        if not result.ok:
            logger.error(f"❌ {step.name} failed (exit code: {result.returncode})")
            if result.stderr:
                logger.error(result.stderr.strip())
            continue
        logger.info(f"✅ {step.name}")

    return report


def provision_registry(
    request: RegistryRequest,
    settings: RegistrySettings,
    runner: Optional[Runner] = None,
    dry_run: bool = False,
) -> Tuple[Dict[str, Path], PipelineReport]:
    """Render and write the manifests, then run every cluster and Helm step."""
    logger.info(
        f"📦 Provisioning registry '{request.registry_name}' for {request.domain} "
        f"in namespace '{settings.namespace}'"
    )
    manifests = render_manifests(request, settings)
    paths = write_manifests(manifests, Path(settings.output_dir))
    steps = build_steps(request, settings, paths)
    report = run_pipeline(steps, runner=runner, dry_run=dry_run)
    if report.success:
        logger.info(f"🎉 Registry '{request.registry_name}' provisioned.")
    return paths, report
