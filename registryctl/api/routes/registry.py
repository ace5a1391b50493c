import threading

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from registryctl.logging import setup_logger
from registryctl.modules.manifests import render_manifests
from registryctl.modules.models import RegistryRequest, RegistrySettings
from registryctl.modules.pipeline import provision_registry
from registryctl.utils import RegistryError

router = APIRouter(prefix="/registry")
logger = setup_logger("registryctl.api")

# Installs share the fixed manifest filenames in Config.OUTPUT_DIR.
install_lock = threading.Lock()


class ManifestRequest(BaseModel):
    registry_name: str
    domain: str


class InstallRequest(ManifestRequest):
    dry_run: bool = False


@router.post("/manifests")
def get_manifests(req: ManifestRequest):
    request = RegistryRequest.from_input(req.registry_name, req.domain)
    manifests = render_manifests(request, RegistrySettings.from_config())
    return {m.filename: m.body for m in manifests.values()}


@router.post("/install")
def install_registry(req: InstallRequest):
    logger.info(f"[INSTALL] Registry={req.registry_name}, Domain={req.domain}, DryRun={req.dry_run}")
    request = RegistryRequest.from_input(req.registry_name, req.domain)
    try:
        with install_lock:
            paths, report = provision_registry(request, RegistrySettings.from_config(), dry_run=req.dry_run)
    except RegistryError as e:
        raise HTTPException(status_code=500, detail=str(e))
    result = report.to_dict()
    result["manifests"] = {kind: str(path) for kind, path in paths.items()}
    return result
