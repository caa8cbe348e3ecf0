from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="",
	                                  case_sensitive=False,
	                                  populate_by_name=True)

	api_key: str | None = Field(
	    default=None,
	    alias="OPENAI_API_KEY",
	    description="API key for the chat completion service",
	)
	base_url: str | None = Field(
	    default=None,
	    alias="OPENAI_BASE_URL",
	    description="Alternative OpenAI-compatible endpoint",
	)
	model: str = Field(
	    "gpt-3.5-turbo",
	    alias="PLS_MODEL",
	    description="Default model name",
	)
	max_tokens: int | None = Field(
	    default=None,
	    alias="PLS_MAX_TOKENS",
	    description="Default completion token limit",
	)
	request_timeout_seconds: int = Field(
	    600,
	    alias="PLS_REQUEST_TIMEOUT_SECONDS",
	    description="Chat request timeout in seconds",
	)
	log_level: str = Field("warning", alias="LOG_LEVEL",
	                       description="Log level")
	context_messages: Any = Field(
	    default_factory=list,
	    alias="PLS_CONTEXT_MESSAGES",
	    description="User messages sent before every prompt",
	)

	@field_validator("context_messages", mode="before")
	@classmethod
	def split_context_messages(cls, v: Any) -> list[str]:
		"""Normalize context messages to a list regardless of input format."""
		if v is None or v == "":
			return []
		if isinstance(v, list):
			return v
		if isinstance(v, tuple):
			return list(v)
		# fallback: comma-separated string
		return [p.strip() for p in str(v).split(",") if p.strip()]

	@field_validator("max_tokens", "request_timeout_seconds")
	@classmethod
	def validate_positive(cls, v: Any, info: ValidationInfo) -> Any:
		if v is None:
			return v
		if int(v) <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	def apply_overrides(self, run_params: "RunParams") -> None:
		"""Apply CLI overrides from RunParams onto this config.

		Only non-None fields in run_params are applied, preserving
		environment-based defaults for anything the user didn't explicitly set.

		Parameters:
			run_params: Validated run parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
		    ("model", "model"),
		    ("max_tokens", "max_tokens"),
		    ("log_level", "log_level"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(run_params, param_field)
			if value is not None:
				setattr(self, config_field, value)


__all__ = ["Config", "load_env"]
