# ABOUTME: Runtime settings for the analyzer CLI, read from the environment and .env files
# ABOUTME: Command line flags take precedence over these values

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "JAVA_SCOPES_"

TRUE_VALUES = {"1", "true", "yes", "on"}


class AnalyzerSettings(BaseModel):
    log_level: str = Field(default="WARNING", description="Logging level name")
    indent: int = Field(default=0, ge=0, description="Indent of the rendered summary")
    show_tree: bool = Field(
        default=False, description="Print the raw syntax tree before the summary"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_settings(env_file: Optional[str] = None) -> AnalyzerSettings:
    """Build settings from JAVA_SCOPES_* environment variables"""
    load_dotenv(env_file)

    values = {}
    log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level
    indent = os.getenv(f"{ENV_PREFIX}INDENT")
    if indent:
        values["indent"] = indent
    show_tree = os.getenv(f"{ENV_PREFIX}SHOW_TREE")
    if show_tree:
        values["show_tree"] = show_tree.strip().lower() in TRUE_VALUES

    return AnalyzerSettings(**values)
