"""Configuration management for ProNet."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from .errors import ConfigError
from .models import User

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SessionConfig:
    """The demo member the CLI signs in as."""

    user_id: str = "demo-user"
    full_name: str = "Alex Morgan"
    email: str = "alex.morgan@example.com"
    headline: str = "Software Engineer"
    skills: List[str] = field(default_factory=lambda: ["Python", "Swift", "AWS"])

    def to_user(self) -> User:
        return User(
            id=self.user_id,
            email=self.email,
            full_name=self.full_name,
            headline=self.headline,
            skills=list(self.skills),
        )


@dataclass
class JobsConfig:
    """Job board sizing."""

    page_size: int = 20
    catalog_size: int = 100
    initial_count: int = 10


@dataclass
class FeedConfig:
    """Feed sizing."""

    page_size: int = 20
    catalog_size: int = 100


@dataclass
class SimulationConfig:
    """Random seed and simulated latencies."""

    seed: Optional[int] = None
    search_delay: float = 0.0
    load_more_delay: float = 0.0
    notification_interval_seconds: int = 30
    message_interval_seconds: int = 10


@dataclass
class Config:
    """Main configuration class."""

    session: SessionConfig = field(default_factory=SessionConfig)
    jobs: JobsConfig = field(default_factory=JobsConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    log_level: str = "INFO"

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to config file. Defaults to config.yaml in current directory.

        Returns:
            Config instance. Defaults are used when the file does not exist;
            PRONET_SEED and PRONET_LOG_LEVEL override the file either way.

        Raises:
            ConfigError: if a value has the wrong type.
        """
        if config_path is None:
            config_path = "config.yaml"

        path = Path(config_path)
        data = {}
        if path.exists():
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ConfigError(f"{config_path} must contain a mapping")

        try:
            config = cls._from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

        config._apply_env_overrides()
        config.validate()
        return config

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        defaults = cls()

        # Parse session
        session_data = data.get("session") or {}
        session = SessionConfig(
            user_id=str(session_data.get("user_id", defaults.session.user_id)),
            full_name=session_data.get("full_name", defaults.session.full_name),
            email=session_data.get("email", defaults.session.email),
            headline=session_data.get("headline", defaults.session.headline),
            skills=list(session_data.get("skills", defaults.session.skills)),
        )

        # Parse jobs
        jobs_data = data.get("jobs") or {}
        jobs = JobsConfig(
            page_size=int(jobs_data.get("page_size", defaults.jobs.page_size)),
            catalog_size=int(jobs_data.get("catalog_size", defaults.jobs.catalog_size)),
            initial_count=int(jobs_data.get("initial_count", defaults.jobs.initial_count)),
        )

        # Parse feed
        feed_data = data.get("feed") or {}
        feed = FeedConfig(
            page_size=int(feed_data.get("page_size", defaults.feed.page_size)),
            catalog_size=int(feed_data.get("catalog_size", defaults.feed.catalog_size)),
        )

        # Parse simulation
        sim_data = data.get("simulation") or {}
        seed = sim_data.get("seed")
        simulation = SimulationConfig(
            seed=int(seed) if seed is not None else None,
            search_delay=float(sim_data.get("search_delay", 0.0)),
            load_more_delay=float(sim_data.get("load_more_delay", 0.0)),
            notification_interval_seconds=int(
                sim_data.get("notification_interval_seconds", 30)
            ),
            message_interval_seconds=int(sim_data.get("message_interval_seconds", 10)),
        )

        return cls(
            session=session,
            jobs=jobs,
            feed=feed,
            simulation=simulation,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    def _apply_env_overrides(self) -> None:
        seed = os.environ.get("PRONET_SEED")
        if seed:
            try:
                self.simulation.seed = int(seed)
            except ValueError as e:
                raise ConfigError(f"PRONET_SEED must be an integer, got {seed!r}") from e

        log_level = os.environ.get("PRONET_LOG_LEVEL")
        if log_level:
            self.log_level = log_level.upper()

    def validate(self) -> None:
        """Reject values the stores cannot work with."""
        if self.jobs.page_size <= 0 or self.feed.page_size <= 0:
            raise ConfigError("page_size must be positive")
        if self.jobs.catalog_size < 0 or self.feed.catalog_size < 0:
            raise ConfigError("catalog_size cannot be negative")
        if self.simulation.search_delay < 0 or self.simulation.load_more_delay < 0:
            raise ConfigError("Simulated delays cannot be negative")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")

    def save(self, config_path: str = "config.yaml") -> None:
        """
        Save configuration to YAML file.

        Args:
            config_path: Path to config file.
        """
        data = {
            "session": {
                "user_id": self.session.user_id,
                "full_name": self.session.full_name,
                "email": self.session.email,
                "headline": self.session.headline,
                "skills": self.session.skills,
            },
            "jobs": {
                "page_size": self.jobs.page_size,
                "catalog_size": self.jobs.catalog_size,
                "initial_count": self.jobs.initial_count,
            },
            "feed": {
                "page_size": self.feed.page_size,
                "catalog_size": self.feed.catalog_size,
            },
            "simulation": {
                "seed": self.simulation.seed,
                "search_delay": self.simulation.search_delay,
                "load_more_delay": self.simulation.load_more_delay,
                "notification_interval_seconds": self.simulation.notification_interval_seconds,
                "message_interval_seconds": self.simulation.message_interval_seconds,
            },
            "log_level": self.log_level,
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def create_default_config(config_path: str = "config.yaml") -> None:
    """Create a default configuration file."""
    config = Config(
        simulation=SimulationConfig(seed=42, search_delay=0.5, load_more_delay=1.0),
    )
    config.save(config_path)
