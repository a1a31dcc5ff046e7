"""Runtime settings, loaded from the environment with pydantic-settings.

``PETSTORE_DATA_DIR``          directory holding the JSON data files
``PETSTORE_PASSWORD_MATCHER``  ``plain`` (default) or ``constant-time``

The CLI loads them once per invocation and hands them down through the
click context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PETSTORE_", frozen=True)

    data_dir: Path = DEFAULT_DATA_DIR
    password_matcher: Literal["plain", "constant-time"] = "plain"

    @field_validator("data_dir")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("password_matcher", mode="before")
    @classmethod
    def normalize_matcher(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def categories_file(self) -> Path:
        return self.data_dir / "categories.json"

    @property
    def customers_file(self) -> Path:
        return self.data_dir / "customers.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"


def load_settings() -> Settings:
    """Read settings from the environment; raises pydantic.ValidationError."""
    return Settings()
