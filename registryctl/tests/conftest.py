import subprocess

import pytest

from registryctl.modules.models import RegistryRequest, RegistrySettings


class FakeRunner:
    """Records argument vectors and returns canned exit codes."""

    def __init__(self, failures=None):
        self.calls = []
        self.failures = failures or {}

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        returncode, stderr = self.failures.get(tuple(cmd[:3]), (0, ""))
        return subprocess.CompletedProcess(cmd, returncode, stdout="", stderr=stderr)


@pytest.fixture
def settings(tmp_path):
    return RegistrySettings(output_dir=str(tmp_path))


@pytest.fixture
def request_input():
    return RegistryRequest.from_input("my-registry\n", "registry.example.com\n")


@pytest.fixture
def fake_runner(monkeypatch):
    runner = FakeRunner()
    monkeypatch.setattr("registryctl.modules.pipeline.run_command", runner)
    return runner
