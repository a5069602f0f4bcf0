from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "https://www.strava.com/api/v3"


class Config(BaseModel):
    """Connection parameters for the Strava API, fixed at client construction."""

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    # Seconds; 0 disables the timeout.
    timeout: int = 30
    scope: str = "read"


class StravaEnvironment(BaseSettings):
    """``STRAVA_*`` environment variables, optionally read from a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="STRAVA_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = DEFAULT_HOST
    id: str = ""
    secret: str = ""
    redirect_uri: str = ""
    timeout: int = 30
    scope: str = "read"

    def to_config(self) -> Config:
        return Config(
            host=self.host,
            client_id=self.id,
            client_secret=self.secret,
            redirect_uri=self.redirect_uri,
            timeout=self.timeout,
            scope=self.scope,
        )


def load_config(env_file: Optional[Union[str, Path]] = ".env") -> Config:
    """Build a :class:`Config` from the process environment.

    Meant to be called once by the application entry point; the client itself
    only ever receives the resulting ``Config``.
    """
    environment = StravaEnvironment(_env_file=env_file)
    return environment.to_config()
