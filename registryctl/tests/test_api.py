import subprocess
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
import yaml
from fastapi.testclient import TestClient

from registryctl.api.main import app
from registryctl.api.routes.registry import InstallRequest, install_registry
from registryctl.config import Config
from registryctl.utils import CommandLaunchError

client = TestClient(app)
HEADERS = {"X-API-Key": Config.API_KEY}


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "OUTPUT_DIR", str(tmp_path))
    return tmp_path


def test_missing_api_key_is_rejected():
    response = client.post("/registry/manifests", json={"registry_name": "r", "domain": "d"})
    assert response.status_code == 403


def test_manifests_endpoint():
    response = client.post(
        "/registry/manifests",
        json={"registry_name": "my-registry", "domain": " registry.example.com\n"},
        headers=HEADERS,
    )

    assert response.status_code == 200
    body = response.json()
    assert sorted(body) == ["ingress-service.yaml", "registry-namespace.yaml", "service.yaml"]
    ingress = yaml.safe_load(body["ingress-service.yaml"])
    assert ingress["spec"]["tls"][0]["hosts"] == ["registry.example.com"]


def test_install_endpoint_dry_run(output_dir, fake_runner):
    response = client.post(
        "/registry/install",
        json={"registry_name": "my-registry", "domain": "registry.example.com", "dry_run": True},
        headers=HEADERS,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["failed"] == []
    assert body["steps"][-1]["command"][:3] == ["helm", "install", "my-registry"]
    assert body["manifests"]["Service"] == str(output_dir / "service.yaml")
    assert fake_runner.calls == []


def test_install_endpoint_reports_failure(output_dir, fake_runner):
    fake_runner.failures[("kubectl", "apply", "-f")] = (1, "error: the server doesn't have a resource type")

    response = client.post(
        "/registry/install",
        json={"registry_name": "my-registry", "domain": "registry.example.com"},
        headers=HEADERS,
    )

    body = response.json()
    assert body["success"] is False
    assert [f["step"] for f in body["failed"]] == [
        "apply service.yaml", "apply registry-namespace.yaml", "apply ingress-service.yaml",
    ]
    assert body["completed"] == ["helm repo add", "helm repo update", "helm install"]


def test_install_endpoint_launch_failure(output_dir, monkeypatch):
    def missing(cmd):
        raise CommandLaunchError(f"could not start '{cmd[0]}'", step=" ".join(cmd))

    monkeypatch.setattr("registryctl.modules.pipeline.run_command", missing)
    response = client.post(
        "/registry/install",
        json={"registry_name": "my-registry", "domain": "registry.example.com"},
        headers=HEADERS,
    )

    assert response.status_code == 500
    assert "could not start 'kubectl'" in response.json()["detail"]


def test_concurrent_installs_apply_their_own_ingress(output_dir, monkeypatch):
    applied_hosts = {}

    def slow_cluster(cmd):
        manifest = Path(cmd[3]).name if cmd[:2] == ["kubectl", "apply"] else None
        if manifest == "service.yaml":
            # leave room for another request to rewrite the manifests
            time.sleep(0.2)
        if manifest == "ingress-service.yaml":
            with open(cmd[3]) as f:
                host = yaml.safe_load(f)["spec"]["rules"][0]["host"]
            applied_hosts.setdefault(host, []).append(host)
        if cmd[:2] == ["helm", "install"]:
            applied_hosts.setdefault("releases", []).append(cmd[2])
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    monkeypatch.setattr("registryctl.modules.pipeline.run_command", slow_cluster)
    requests = [
        InstallRequest(registry_name="alpha", domain="alpha.example.com"),
        InstallRequest(registry_name="beta", domain="beta.example.com"),
    ]

    with ThreadPoolExecutor(max_workers=2) as pool:
        results = list(pool.map(install_registry, requests))

    assert all(r["success"] for r in results)
    assert applied_hosts["alpha.example.com"] == ["alpha.example.com"]
    assert applied_hosts["beta.example.com"] == ["beta.example.com"]
    assert sorted(applied_hosts["releases"]) == ["alpha", "beta"]


def test_middleware_accepts_explicit_token():
    from fastapi import FastAPI
    from registryctl.api.middleware import AuthMiddleware

    custom = FastAPI()
    custom.add_middleware(AuthMiddleware, token="ci-token")

    @custom.get("/ping")
    def ping():
        return {"ok": True}

    custom_client = TestClient(custom)
    assert custom_client.get("/ping", headers={"X-API-Key": "ci-token"}).status_code == 200
    assert custom_client.get("/ping", headers=HEADERS).status_code == 403
