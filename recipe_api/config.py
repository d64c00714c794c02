import logging
import os
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from dotenv import load_dotenv


ENVIRONMENTS = ("production", "development", "test")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    database_url: str = "sqlite:///./recipes.db"
    test_database_url: str = "sqlite:///./test.db"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    seed_on_startup: bool = False

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "Settings":
        """Build settings from the environment, after loading a .env file.

        Variables already present in the environment win over the file.
        """
        load_dotenv(dotenv_path)
        env = os.getenv("APP_ENV", cls.env).strip().lower()
        if env not in ENVIRONMENTS:
            raise ValueError(f"APP_ENV must be one of {ENVIRONMENTS}, got {env!r}")
        return cls(
            env=env,
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            test_database_url=os.getenv("TEST_DATABASE_URL", cls.test_database_url),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            seed_on_startup=_flag(os.getenv("SEED_ON_STARTUP")),
        )

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def store_url(self) -> str:
        # test mode always gets its own database
        if self.env == "test":
            return self.test_database_url
        return self.database_url

    @property
    def seed_at_bootstrap(self) -> bool:
        if self.is_production:
            return False
        return self.env == "test" or self.seed_on_startup


def redact_url(url: str) -> str:
    """Return the URL with any password replaced by ***."""
    parts = urlsplit(url)
    if not parts.password:
        return url
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
