# lexdb/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.

    Every field can be overridden from the environment with the LEXDB_ prefix
    (e.g. LEXDB_WORDNET_DIR=/usr/share/wordnet/dict).
    """

    # --- Dictionary Location ---
    # Directory holding index.noun, data.noun, ... (no default on purpose:
    # an unset path makes the dictionary fail fast when a file is needed).
    WORDNET_DIR: Optional[str] = None

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Loading Policy ---
    # False: a synset whose line cannot be read keeps its default shape.
    # True: the failure surfaces as SynsetLoadError.
    STRICT_SYNSET_LOADING: bool = False

    # Resolve sense numbers while parsing data lines instead of on request.
    # Each resolution is a full index-file scan, so this stays off by default.
    EAGER_SENSE_NUMBERS: bool = False

    FILE_ENCODING: str = "utf-8"

    model_config = SettingsConfigDict(env_prefix="LEXDB_", env_file=".env", extra="ignore")


settings = Settings()
