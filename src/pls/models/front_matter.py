"""
Template front matter model.

Defines the per-template generation settings a prompt template may
declare in its front matter block.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TemplateFrontMatter(BaseModel):
	"""Generation settings loaded from a prompt template's front matter."""

	temperature: Optional[float] = Field(default=None,
	                                     description="Sampling temperature")
	model: Optional[str] = Field(default=None,
	                             description="Override model name")
	max_tokens: Optional[int] = Field(
	    default=None, description="Completion token limit")
	system: Optional[str] = Field(
	    default=None, description="System message sent before the prompt")

	@field_validator("temperature")
	@classmethod
	def validate_temperature(cls, v: Optional[float]) -> Optional[float]:
		if v is not None and not 0.0 <= v <= 2.0:
			raise ValueError("temperature must be between 0 and 2")
		return v

	@field_validator("max_tokens")
	@classmethod
	def validate_max_tokens(cls, v: Optional[int]) -> Optional[int]:
		if v is not None and v <= 0:
			raise ValueError("max_tokens must be > 0")
		return v


__all__ = ["TemplateFrontMatter"]
