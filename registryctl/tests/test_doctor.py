from registryctl.modules import doctor
from registryctl.modules.models import RegistrySettings


def test_check_binaries_all_present(monkeypatch):
    monkeypatch.setattr(doctor.shutil, "which", lambda name: f"/usr/local/bin/{name}")
    result = doctor.check_binaries(RegistrySettings())
    assert result["status"] == "ok"
    assert result["binaries"]["helm"] == "/usr/local/bin/helm"


def test_check_binaries_missing_helm(monkeypatch):
    monkeypatch.setattr(doctor.shutil, "which", lambda name: None if name == "helm" else "/usr/bin/kubectl")
    result = doctor.check_binaries(RegistrySettings())
    assert result["status"] == "missing"
    assert result["binaries"]["helm"] is None


def test_kube_context_error_is_reported(monkeypatch):
    def broken(*args, **kwargs):
        raise doctor.config.config_exception.ConfigException("Invalid kube-config file. No configuration found.")

    monkeypatch.setattr(doctor.config, "load_kube_config", broken)
    assert doctor.check_kube_context().startswith("❌ Failed to load kubeconfig")
