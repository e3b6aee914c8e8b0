from pathlib import Path

from recharge.config import (
    AppConfig,
    DeployConfig,
    SubmissionConfig,
    get_config,
    reset_config,
)


def test_deploy_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    config = DeployConfig()

    assert config.branch == "gh-pages"
    assert config.remote == "origin"
    assert config.build_args == ["npm", "run", "build"]
    assert config.build_path == tmp_path.resolve() / "build"
    assert config.workspace_path == tmp_path.resolve() / "gh-pages"


def test_deploy_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RECHARGE_DEPLOY_BRANCH", "pages")
    monkeypatch.setenv("RECHARGE_DEPLOY_BUILD_COMMAND", "vite build --outDir 'dist out'")
    monkeypatch.setenv("RECHARGE_DEPLOY_PROJECT_ROOT", str(tmp_path))

    config = DeployConfig()

    assert config.branch == "pages"
    assert config.build_args == ["vite", "build", "--outDir", "dist out"]
    assert config.project_root == Path(tmp_path)


def test_submission_endpoint_from_public_variable(monkeypatch):
    monkeypatch.setenv("PUBLIC_SUBMISSION_ENDPOINT", "https://forms.example.com/submit")

    assert SubmissionConfig().endpoint == "https://forms.example.com/submit"


def test_submission_endpoint_unset_by_default(monkeypatch):
    monkeypatch.delenv("PUBLIC_SUBMISSION_ENDPOINT", raising=False)
    monkeypatch.delenv("RECHARGE_SUBMISSION_ENDPOINT", raising=False)

    assert SubmissionConfig().endpoint is None


def test_submission_endpoint_by_field_name():
    assert SubmissionConfig(endpoint="http://localhost:8787").endpoint == "http://localhost:8787"


def test_log_settings(monkeypatch):
    monkeypatch.setenv("RECHARGE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("RECHARGE_LOG_STRUCTURED", "true")

    config = AppConfig()

    assert config.observability.level == "DEBUG"
    assert config.observability.structured is True


def test_get_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    reset_config()
    assert get_config() is not first
