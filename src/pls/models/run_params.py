"""
Run parameters model.

Defines validated run parameters for CLI invocation and the runner.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

STDOUT_MARKER = "-"


class RunParams(BaseModel):
	"""
	Validated run parameters for CLI/runner.

	``model``, ``temperature`` and ``max_tokens`` override the values set in
	the prompt template's front matter.
	"""

	prompt_file: str = Field(description="Prompt template file")
	input_file: Optional[str] = Field(
	    default=None, description="Input file embedded into the prompt")
	output_file: Optional[str] = Field(
	    default=None, description="Output file; '-' for stdout")
	print_prompt: bool = Field(
	    default=False, description="Print the rendered prompt and copy it")
	replace_input_file: bool = Field(
	    default=False, description="Rewrite the input file in place")
	no_input: bool = Field(default=False,
	                       description="Use the prompt with no input")
	model: Optional[str] = Field(default=None, description="Override model")
	temperature: Optional[float] = Field(
	    default=None, description="Override temperature")
	max_tokens: Optional[int] = Field(default=None,
	                                  description="Override max tokens")
	log_level: Optional[str] = Field(default=None,
	                                 description="Override log level")

	@field_validator('prompt_file')
	@classmethod
	def validate_prompt_file(cls, v: str) -> str:
		if not v.strip():
			raise ValueError("prompt_file must not be empty")
		return v

	@field_validator('max_tokens')
	@classmethod
	def validate_positive(cls, v: Optional[int]) -> Optional[int]:
		if v is None:
			return v
		if v <= 0:
			raise ValueError("max_tokens must be > 0")
		return v

	@field_validator('temperature')
	@classmethod
	def validate_temperature(cls, v: Optional[float]) -> Optional[float]:
		if v is not None and not 0.0 <= v <= 2.0:
			raise ValueError("temperature must be between 0 and 2")
		return v

	@model_validator(mode="after")
	def validate_input_flags(self) -> "RunParams":
		if self.replace_input_file and not self.input_file:
			raise ValueError("--replace requires an input file")
		if self.no_input and self.input_file:
			raise ValueError("--no-input conflicts with an input file")
		return self

	@property
	def writes_stdout(self) -> bool:
		"""True when output goes to stdout rather than a file."""
		return self.target_file is None

	@property
	def target_file(self) -> Optional[str]:
		"""
		File to replace with the completion, or None for stdout.

		An explicit output file wins; ``--replace`` falls back to the
		input file.
		"""
		if self.output_file not in (None, STDOUT_MARKER):
			return self.output_file
		if self.replace_input_file:
			return self.input_file
		return None


__all__ = ["RunParams", "STDOUT_MARKER"]
