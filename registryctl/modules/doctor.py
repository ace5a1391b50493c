import shutil

from kubernetes import config

from .models import RegistrySettings


def check_kube_context():
    try:
        config.load_kube_config()
        contexts, active_context = config.list_kube_config_contexts()
        return active_context['name']
    except Exception as e:
        return f"❌ Failed to load kubeconfig: {e}"


def check_binaries(settings: RegistrySettings):
    found = {}
    for binary in (settings.kubectl_bin, settings.helm_bin):
        found[binary] = shutil.which(binary)
    return {
        "binaries": found,
        "status": "ok" if all(found.values()) else "missing",
    }


def run(settings: RegistrySettings):
    return {
        "kube_context": check_kube_context(),
        "binaries": check_binaries(settings),
    }
