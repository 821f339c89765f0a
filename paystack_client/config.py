"""
Client configuration.

A ClientConfig is built once from configuration functions and is never
changed afterwards:

    config = build_config(with_secret_key("sk_test_..."), with_base_url("http://localhost:8080"))

It can also be read from the environment (PAYSTACK_SECRET_KEY,
PAYSTACK_BASE_URL, optionally via a .env file) or from a YAML file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Optional, Union

import httpx
import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

BASE_URL = "https://api.paystack.co"


class ClientConfig(BaseModel):
    """Connection settings shared by every resource client."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    secret_key: Optional[str] = None
    base_url: str = BASE_URL
    http_client: Optional[httpx.Client] = None

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def __repr__(self) -> str:
        # never echo the secret key
        masked = "***" if self.secret_key else None
        return f"ClientConfig(secret_key={masked!r}, base_url={self.base_url!r})"

    __str__ = __repr__


ClientOption = Callable[[ClientConfig], ClientConfig]


def _replace(config: ClientConfig, **changes: Any) -> ClientConfig:
    return ClientConfig.model_validate({**dict(config), **changes})


def with_secret_key(secret_key: str) -> ClientOption:
    def _apply(config: ClientConfig) -> ClientConfig:
        return _replace(config, secret_key=secret_key)

    return _apply


def with_base_url(base_url: str) -> ClientOption:
    """Point the client at another host, e.g. a local test server."""

    def _apply(config: ClientConfig) -> ClientConfig:
        return _replace(config, base_url=base_url)

    return _apply


def with_http_client(http_client: httpx.Client) -> ClientOption:
    """
    Use a caller-owned httpx.Client as the transport.

    Timeouts, proxies and connection limits are configured on that client.
    The library never closes it.
    """

    def _apply(config: ClientConfig) -> ClientConfig:
        return _replace(config, http_client=http_client)

    return _apply


def build_config(*options: ClientOption) -> ClientConfig:
    config = ClientConfig()
    for option in options:
        config = option(config)
    return config


def config_from_env(load_env_file: bool = True) -> ClientConfig:
    """Build a config from PAYSTACK_SECRET_KEY / PAYSTACK_BASE_URL."""
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))
    return ClientConfig(
        secret_key=os.getenv("PAYSTACK_SECRET_KEY") or None,
        base_url=os.getenv("PAYSTACK_BASE_URL", BASE_URL),
    )


class _PaystackSection(BaseModel):
    secret_key: Optional[str] = None
    base_url: str = Field(default=BASE_URL, min_length=1)


class _ConfigFile(BaseModel):
    paystack: _PaystackSection = Field(default_factory=_PaystackSection)


def load_config_file(config_path: Union[str, Path]) -> ClientConfig:
    """
    Load client settings from a YAML file shaped like:

        paystack:
          secret_key: sk_test_xxx
          base_url: https://api.paystack.co

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file doesn't match the schema
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        section = _ConfigFile(**config_data).paystack
    except ValidationError as e:
        logger.error("Paystack config validation failed: %s", e)
        raise

    logger.info("Loaded Paystack client config from %s", config_path)
    return ClientConfig(secret_key=section.secret_key, base_url=section.base_url)
