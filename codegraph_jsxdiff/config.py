"""
Application Configuration

Environment variables use the JSXDIFF_ prefix.
Example: JSXDIFF_TEST_ID_ATTRIBUTE=data-testid, JSXDIFF_RANGE_MODE=precise

Usage:
    from codegraph_jsxdiff.config import get_settings

    settings = get_settings()
    settings.test_id_attribute
"""

import logging
import re
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ATTRIBUTE_NAME = re.compile(r"^[A-Za-z_:][\w:.\-]*$")


class RangeMode(str, Enum):
    """
    Changed-range policy.

    - SPAN: one [min, max] range per hunk with added lines
    - PRECISE: one range per run of consecutive added lines
    """

    SPAN = "span"
    PRECISE = "precise"

    def __str__(self) -> str:
        return self.value


class Settings(BaseSettings):
    """
    codegraph-jsxdiff settings.

    Attributes:
        test_id_attribute: Markup attribute used as UI test hook
        range_mode: Changed-range policy (span | precise)
        code_extensions: Extensions of files worth analyzing
        component_wrappers: Callees whose function argument still counts
            as a component or function binding (memo, forwardRef)
        log_level: Log level name
        log_json: Render logs as JSON
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JSXDIFF_",
        extra="ignore",
    )

    test_id_attribute: str = Field(default="data-test-id")
    range_mode: RangeMode = Field(default=RangeMode.SPAN)
    code_extensions: tuple[str, ...] = Field(default=(".ts", ".tsx", ".js", ".jsx"))
    component_wrappers: tuple[str, ...] = Field(
        default=("memo", "forwardRef", "React.memo", "React.forwardRef")
    )
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("test_id_attribute")
    @classmethod
    def validate_test_id_attribute(cls, v: str) -> str:
        v = v.strip()
        if not _ATTRIBUTE_NAME.match(v):
            raise ValueError(f"Invalid attribute name: {v!r}")
        return v

    @field_validator("code_extensions")
    @classmethod
    def validate_code_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for ext in v:
            if not ext.startswith("."):
                raise ValueError(f"Extension must start with '.': {ext!r}")
        return tuple(ext.lower() for ext in v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get process-wide settings (read once from the environment)."""
    return Settings()
