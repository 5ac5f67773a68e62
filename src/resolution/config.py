"""
Settings for resolving phyloreferences.

Settings are read from JPHYLOREF_* environment variables, optionally loaded
from a .env file, and can be overridden by command-line options.
"""

import os
from pathlib import Path
from typing import Any, Optional, Union

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from ontology.vocabulary import DEFAULT_URI_PREFIX
from reasoning.registry import DEFAULT_REASONER

ENV_PREFIX = "JPHYLOREF_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ResolverSettings(BaseModel):
    """Configuration of the resolution pipeline."""

    default_prefix: str = Field(DEFAULT_URI_PREFIX, description="Base IRI for JSON-LD input, stripped from reported IRIs")
    reasoner: str = Field(DEFAULT_REASONER, description="Name of the reasoner to classify with")
    ontologies_dir: str = Field("ontologies", description="Directory of local copies of imported ontologies")
    follow_remote_imports: bool = Field(False, description="Fetch imports without a local copy from the web")
    java_exe: Optional[str] = Field(None, description="Java executable used by HermiT and Pellet")
    log_level: str = Field("INFO", description="Level of progress messages written to stderr")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None, **overrides: Any) -> "ResolverSettings":
        """
        Build settings from the environment.

        Args:
            env_file: .env file to load; searched for upwards from the working directory if None
            **overrides: Values taking precedence over the environment; None values are ignored

        Returns:
            ResolverSettings instance
        """
        load_dotenv(env_file if env_file is not None else find_dotenv(usecwd=True))

        values = {}
        for field_name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + field_name.upper())
            if raw is not None:
                values[field_name] = raw

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
