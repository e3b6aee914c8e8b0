"""Shared fixtures: fake ports and a throwaway site layout."""

from __future__ import annotations

from pathlib import Path

import pytest

from recharge.config import DeployConfig, reset_config
from recharge.container import reset_container

from .fakes import FakeCommandRunner, FakeVersionControl


@pytest.fixture(autouse=True)
def _fresh_singletons():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Project directory with a finished build."""
    build = tmp_path / "build"
    (build / "assets").mkdir(parents=True)
    (build / "index.html").write_text("<h1>Recharge</h1>")
    (build / "assets" / "app.js").write_text("console.log('hi');")
    return tmp_path


@pytest.fixture
def deploy_config(site_root: Path) -> DeployConfig:
    return DeployConfig(project_root=site_root, site_url=None)


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture
def fake_vcs() -> FakeVersionControl:
    return FakeVersionControl()
