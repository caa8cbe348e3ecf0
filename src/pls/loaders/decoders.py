"""
Structured decoders for front matter blocks.

``YamlFrontMatterDecoder`` reads the block as YAML and writes the keys it
recognizes into either a pydantic model or a mutable mapping. Keys are
matched to field names after lowercasing and turning ``-`` into ``_``.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic.fields import FieldInfo


def normalize_key(key: Any) -> str:
	"""Map a front matter key onto a Python field name (``max-tokens`` -> ``max_tokens``)."""
	return str(key).strip().lower().replace("-", "_")


class YamlFrontMatterDecoder:
	"""Decode a YAML front matter block into a model or a mapping."""

	def decode(self, data: bytes, destination: Any) -> None:
		"""
		Decode YAML ``data`` into ``destination``.

		Parameters:
			data: UTF-8 encoded YAML block.
			destination: A pydantic model instance, updated in place with
				the fields it declares, or a mutable mapping, updated with
				every key.

		Raises:
			yaml.YAMLError: If the block is not valid YAML.
			pydantic.ValidationError: If a value has the wrong type.
			ValueError: If the block is not a mapping.
			TypeError: If the destination kind is unsupported.
		"""
		loaded = yaml.safe_load(data.decode("utf-8"))
		if loaded is None:
			loaded = {}
		if not isinstance(loaded, dict):
			raise ValueError(
			    f"front matter must be a mapping, got {type(loaded).__name__}")
		values = {normalize_key(k): v for k, v in loaded.items()}

		if isinstance(destination, BaseModel):
			_assign_model_fields(destination, values)
		elif isinstance(destination, MutableMapping):
			destination.update(values)
		else:
			raise TypeError(
			    f"unsupported front matter destination: {type(destination).__name__}"
			)


def _input_key(name: str, field: FieldInfo) -> str:
	"""Key under which ``model_validate`` expects the field's value."""
	if isinstance(field.validation_alias, str):
		return field.validation_alias
	return field.alias or name


def _assign_model_fields(destination: BaseModel, values: dict[str, Any]) -> None:
	"""Validate recognized keys against the model, then assign them in place."""
	fields = type(destination).model_fields
	known = {k: v for k, v in values.items() if k in fields}
	# validate everything first so a bad value leaves the destination untouched
	data = {
	    _input_key(name, field): getattr(destination, name)
	    for name, field in fields.items()
	}
	data.update({_input_key(k, fields[k]): v for k, v in known.items()})
	validated = type(destination).model_validate(data)
	for name in known:
		setattr(destination, name, getattr(validated, name))


__all__ = ["YamlFrontMatterDecoder", "normalize_key"]
