"""Configuration for browsernode read from the environment and `.env`."""

import logging
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class EnvConfig(BaseSettings):
    """Environment variable configuration using pydantic-settings."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        env_ignore_empty=True,
        extra='allow'
    )

    # Logging
    BROWSERNODE_LOGGING_LEVEL: str = Field(default='info')
    CDP_LOGGING_LEVEL: str = Field(default='WARNING')
    BROWSERNODE_DEBUG_LOG_FILE: str | None = Field(default=None)
    BROWSERNODE_INFO_LOG_FILE: str | None = Field(default=None)

    # Element proxy behaviour
    BROWSERNODE_LEGACY_WHITESPACE: bool = Field(default=False)
    BROWSERNODE_PAGE_AGENT: str = Field(default='__browsernode')


class Config:
    """Configuration class backed by the environment.

    Re-reads environment variables on every access so tests and long-running
    drivers can flip settings without rebuilding handles.
    """

    _instance: 'Config | None' = None

    def __new__(cls) -> 'Config':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def LOGGING_LEVEL(self) -> str:
        return os.getenv('BROWSERNODE_LOGGING_LEVEL', 'info').lower()

    @property
    def CDP_LOGGING_LEVEL(self) -> str:
        return os.getenv('CDP_LOGGING_LEVEL', 'WARNING')

    @property
    def DEBUG_LOG_FILE(self) -> str | None:
        return os.getenv('BROWSERNODE_DEBUG_LOG_FILE') or None

    @property
    def INFO_LOG_FILE(self) -> str | None:
        return os.getenv('BROWSERNODE_INFO_LOG_FILE') or None

    @property
    def LEGACY_WHITESPACE(self) -> bool:
        return os.getenv('BROWSERNODE_LEGACY_WHITESPACE', 'false').lower()[:1] in ('t', 'y', '1')

    @property
    def PAGE_AGENT(self) -> str:
        return os.getenv('BROWSERNODE_PAGE_AGENT', '__browsernode')

    def load_env_config(self) -> EnvConfig:
        """Snapshot the current environment (including `.env`) as a validated model."""
        env_config = EnvConfig()
        logger.debug(f'Loaded environment config: legacy_whitespace={env_config.BROWSERNODE_LEGACY_WHITESPACE}')
        return env_config


CONFIG = Config()
