"""Unit tests for replication bootstrap wiring."""

from pathlib import Path

import pytest

from deleteproject.bootstrap.replication import (
    get_replication_daemon_config,
    get_replication_settings,
    reset_replication_settings,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_replication_settings()
    yield
    reset_replication_settings()


class TestReplicationBootstrap:
    """Tests for the resolved-once settings."""

    def test_absent_daemon_config_means_no_replication(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("GIT_CONFIG", str(tmp_path / "missing.gitconfig"))

        settings = get_replication_settings()

        assert settings.replication_configured is False
        assert settings.daemon_config_path == tmp_path / "missing.gitconfig"

    def test_resolves_chain_once(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        properties = tmp_path / "application.properties"
        properties.write_text("gerrit.repo.home=/srv/repos\n")
        gitconfig = tmp_path / "gitconfig"
        gitconfig.write_text(f"[core]\n  gitmsconfig = {properties}\n")
        monkeypatch.setenv("GIT_CONFIG", str(gitconfig))

        first = get_replication_settings()
        properties.write_text("gerrit.repo.home=/elsewhere\n")

        assert get_replication_settings() is first
        assert first.repo_home == "/srv/repos"

    def test_daemon_config_variable_is_configurable(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("REPLICATION_DAEMON_CONFIG_ENV", "GITMS_CONFIG")
        monkeypatch.setenv("GITMS_CONFIG", str(tmp_path / "gitms.gitconfig"))

        assert get_replication_daemon_config().config_env_var == "GITMS_CONFIG"
        assert get_replication_settings().daemon_config_path == (
            tmp_path / "gitms.gitconfig"
        )
