"""Application configuration helpers."""

from __future__ import annotations

from .bookstore import BookstoreConfig, get_bookstore_config
from .countries import CountriesConfig, get_countries_config
from .env import env_choice, env_or_default
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .pipeline import PipelineConfig, get_pipeline_config

__all__ = [
    "BookstoreConfig",
    "ConfigurationError",
    "CountriesConfig",
    "PipelineConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "env_choice",
    "env_or_default",
    "get_bookstore_config",
    "get_countries_config",
    "get_pipeline_config",
]
