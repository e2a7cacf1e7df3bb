"""Tests for configuration loading and the CLI."""

import pytest
import yaml

from pronet.config import Config, create_default_config
from pronet.errors import ConfigError
from pronet.main import build_app, build_parser, filters_from_args, main
from pronet.models import WorkType


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PRONET_SEED", raising=False)
    monkeypatch.delenv("PRONET_LOG_LEVEL", raising=False)


class TestConfig:
    def test_defaults_when_missing(self, tmp_path):
        config = Config.load(str(tmp_path / "missing.yaml"))
        assert config.jobs.page_size == 20
        assert config.jobs.catalog_size == 100
        assert config.jobs.initial_count == 10
        assert config.feed.page_size == 20
        assert config.simulation.notification_interval_seconds == 30
        assert config.simulation.message_interval_seconds == 10
        assert config.simulation.seed is None
        assert config.log_level == "INFO"

    def test_load_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({
            "session": {"full_name": "Sam Lee", "skills": ["Go"]},
            "jobs": {"page_size": 5},
            "simulation": {"seed": 9, "search_delay": 0.2},
            "log_level": "debug",
        }))
        config = Config.load(str(path))
        assert config.session.full_name == "Sam Lee"
        assert config.session.skills == ["Go"]
        assert config.jobs.page_size == 5
        assert config.jobs.catalog_size == 100
        assert config.simulation.seed == 9
        assert config.simulation.search_delay == 0.2
        assert config.log_level == "DEBUG"

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PRONET_SEED", "77")
        monkeypatch.setenv("PRONET_LOG_LEVEL", "warning")
        config = Config.load(str(tmp_path / "missing.yaml"))
        assert config.simulation.seed == 77
        assert config.log_level == "WARNING"

    def test_bad_seed_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PRONET_SEED", "abc")
        with pytest.raises(ConfigError):
            Config.load(str(tmp_path / "missing.yaml"))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"jobs": {"page_size": 0}}))
        with pytest.raises(ConfigError):
            Config.load(str(path))

        path.write_text(yaml.dump({"jobs": {"page_size": "many"}}))
        with pytest.raises(ConfigError):
            Config.load(str(path))

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "config.yaml"
        create_default_config(str(path))
        config = Config.load(str(path))
        assert config.simulation.seed == 42
        assert config.simulation.load_more_delay == 1.0


class TestCli:
    def test_build_app(self):
        config = Config()
        app = build_app(config, seed=3)
        assert app.session.user_id == config.session.user_id
        assert len(app.jobs.catalog) == 100
        assert app.jobs.session is app.posts.session

    def test_same_seed_same_catalog(self):
        first = build_app(Config(), seed=11)
        second = build_app(Config(), seed=11)
        assert [j.id for j in first.jobs.catalog] == [j.id for j in second.jobs.catalog]

    def test_filters_from_args(self):
        args = build_parser().parse_args(
            ["search", "-k", "python", "--work-type", "remote", "--remote", "--salary-min", "90000"]
        )
        filters = filters_from_args(args)
        assert filters.keywords == "python"
        assert filters.work_types == {WorkType.REMOTE}
        assert filters.is_remote_only
        assert filters.salary_min == 90000

    def test_search_command(self, tmp_path):
        config_path = str(tmp_path / "missing.yaml")
        assert main(["-c", config_path, "--seed", "1", "search", "--remote", "-p", "2"]) == 0

    def test_stats_command(self, tmp_path):
        assert main(["-c", str(tmp_path / "missing.yaml"), "stats", "--title", "Engineer"]) == 0

    def test_validate_command(self):
        assert main([
            "validate", "--email", "alex@example.com", "--password", "secret1",
            "--confirm-password", "secret1", "--full-name", "Alex",
        ]) == 0
        assert main(["validate", "--email", "nope"]) == 1

    def test_init_command(self, tmp_path):
        path = tmp_path / "config.yaml"
        assert main(["-c", str(path), "init"]) == 0
        assert path.exists()

    def test_bad_config_reports_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"feed": {"page_size": -1}}))
        assert main(["-c", str(path), "feed"]) == 1
