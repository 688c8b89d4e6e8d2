"""Application settings loaded from the environment and a local .env file."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .analysis.display import DEFAULT_AVATAR_BASE_URL
from .db.errors import ConfigurationError


DEFAULT_PLAYERS_TABLE = "players"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration.

    Attributes:
        supabase_url: Project URL of the hosted database.
        supabase_key: Anonymous (public) API key.
        players_table: Table holding player records.
        avatar_base_url: Root URL of the avatar image service.
        log_level: Logging level name.
    """

    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    players_table: str = DEFAULT_PLAYERS_TABLE
    avatar_base_url: str = DEFAULT_AVATAR_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL

    def require_database(self) -> None:
        """
        Check that database credentials are configured.

        Raises:
            ConfigurationError: If the URL or key is missing.
        """
        missing = [
            name
            for name, value in (
                ("SUPABASE_URL", self.supabase_url),
                ("SUPABASE_ANON_KEY", self.supabase_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing settings: {', '.join(missing)}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Load settings.

    Args:
        env: Mapping to read from. Defaults to os.environ after loading .env.

    Returns:
        Settings instance.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    return Settings(
        supabase_url=env.get("SUPABASE_URL") or None,
        supabase_key=env.get("SUPABASE_ANON_KEY") or None,
        players_table=env.get("DREAMFC_PLAYERS_TABLE") or DEFAULT_PLAYERS_TABLE,
        avatar_base_url=env.get("DREAMFC_AVATAR_BASE_URL") or DEFAULT_AVATAR_BASE_URL,
        log_level=(env.get("DREAMFC_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for the application."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
