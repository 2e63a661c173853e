"""Configuration system for the webhook agent.

Settings are assembled once at startup from an optional YAML file
(``webhook-agent.yaml`` or the path in ``$WEBHOOK_AGENT_CONFIG``) overlaid
with environment variables, then passed explicitly to everything that needs
them.  ``${VAR}`` placeholders inside the YAML file are expanded from the
environment before validation.
"""

from __future__ import annotations

import logging
import os
import re
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

import pydantic
import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from webhook_agent.errors import ConfigurationError

logger = logging.getLogger("webhook_agent.config")

DEFAULT_NETWORK_ID = "base-sepolia"
DEFAULT_CONFIG_FILE = "webhook-agent.yaml"
REQUIRED_ENV_VARS = ("CDP_API_KEY_NAME", "CDP_API_KEY_PRIVATE_KEY")


# ---------------------------------------------------------------------------
# Environment-variable expansion helper
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def _expand_env_vars(value: str, environ: Mapping[str, str]) -> str:
    """Replace ``${VAR_NAME}`` placeholders with their environment values.

    Unset variables are replaced with an empty string so that the required
    field check reports them as missing.
    """

    def _replace(match: re.Match) -> str:
        return environ.get(match.group(1), "")

    return _ENV_VAR_RE.sub(_replace, value)


def _expand_env_recursive(obj: object, environ: Mapping[str, str]) -> object:
    """Walk an arbitrary nested structure and expand env vars in strings."""
    if isinstance(obj, str):
        return _expand_env_vars(obj, environ)
    if isinstance(obj, dict):
        return {k: _expand_env_recursive(v, environ) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_recursive(item, environ) for item in obj]
    return obj


# ---------------------------------------------------------------------------
# Pydantic v2 models
# ---------------------------------------------------------------------------


class StreamErrorPolicy(str, Enum):
    """What a session driver does after a turn's stream fails."""

    TERMINATE = "terminate"
    CONTINUE = "continue"


class LLMSettings(BaseModel):
    """OpenAI chat model used by the agent runtime."""

    api_key: str = ""
    model: str = "gpt-4o-mini"
    base_url: Optional[str] = None  # For OpenAI-compatible endpoints
    max_tokens: int = 4096


class Settings(BaseModel):
    """Root configuration object, built once by the CLI."""

    cdp_api_key_name: str = ""
    cdp_api_key_private_key: str = ""
    cdp_api_url: str = "https://api.cdp.coinbase.com/platform"
    network_id: Optional[str] = None
    llm: LLMSettings = Field(default_factory=LLMSettings)
    wallet_data_file: Path = Path("wallet_data.txt")
    wallet_password: str = ""
    auto_interval_seconds: float = Field(default=10.0, ge=0)
    stream_error_policy: StreamErrorPolicy = StreamErrorPolicy.TERMINATE
    thread_id: str = "CDP Agentkit Chatbot Example!"

    @property
    def effective_network_id(self) -> str:
        """The network the wallet operates on (falls back to base-sepolia)."""
        return self.network_id or DEFAULT_NETWORK_ID

    @property
    def api_key_secret(self) -> str:
        """The PEM private key with escaped newlines restored."""
        return self.cdp_api_key_private_key.replace("\\n", "\n")


# Environment variable -> dotted settings path
_ENV_FIELDS: dict[str, str] = {
    "CDP_API_KEY_NAME": "cdp_api_key_name",
    "CDP_API_KEY_PRIVATE_KEY": "cdp_api_key_private_key",
    "CDP_API_URL": "cdp_api_url",
    "NETWORK_ID": "network_id",
    "OPENAI_API_KEY": "llm.api_key",
    "OPENAI_MODEL": "llm.model",
    "OPENAI_BASE_URL": "llm.base_url",
    "WALLET_DATA_FILE": "wallet_data_file",
    "WALLET_PASSWORD": "wallet_password",
    "AUTO_INTERVAL_SECONDS": "auto_interval_seconds",
    "STREAM_ERROR_POLICY": "stream_error_policy",
}


def _apply_env(data: dict, environ: Mapping[str, str]) -> dict:
    for var_name, dotted in _ENV_FIELDS.items():
        value = environ.get(var_name)
        if not value:
            continue
        target = data
        *parents, leaf = dotted.split(".")
        for part in parents:
            target = target.setdefault(part, {})
        target[leaf] = value
    return data


def _missing_required(settings: Settings) -> list[str]:
    return [
        name for name in REQUIRED_ENV_VARS
        if not getattr(settings, _ENV_FIELDS[name])
    ]


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build and validate the :class:`Settings` for this process.

    Parameters
    ----------
    path:
        YAML config file.  Defaults to ``$WEBHOOK_AGENT_CONFIG`` or
        ``webhook-agent.yaml`` in the working directory; a missing default
        file is not an error.
    environ:
        Environment mapping.  Defaults to ``os.environ`` after loading a
        ``.env`` file.

    Raises
    ------
    ConfigurationError
        If a required CDP credential is missing or a value fails validation.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    data: dict = {}
    explicit = path is not None or bool(environ.get("WEBHOOK_AGENT_CONFIG"))
    config_path = path or Path(environ.get("WEBHOOK_AGENT_CONFIG") or DEFAULT_CONFIG_FILE)
    if config_path.exists():
        raw_data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        if not isinstance(raw_data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")
        data = _expand_env_recursive(raw_data, environ)
    elif explicit:
        raise ConfigurationError(f"Config file {config_path} does not exist")

    data = _apply_env(data, environ)
    try:
        settings = Settings.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    missing = _missing_required(settings)
    if missing:
        lines = ["Required environment variables are not set"]
        lines += [f"{name}=your_{name.lower()}_here" for name in missing]
        raise ConfigurationError("\n".join(lines))

    if not settings.network_id:
        logger.warning(
            f"NETWORK_ID not set, defaulting to {DEFAULT_NETWORK_ID} testnet"
        )
    return settings
