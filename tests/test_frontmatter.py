"""Tests for front matter splitting and YAML decoding."""

from __future__ import annotations

import io

import pytest
import yaml
from pydantic import BaseModel, Field, ValidationError

from pls.errors import (
    ClosingDelimiterNotFoundError,
    FrontMatterError,
    MetadataDecodeError,
    MismatchedDelimiterError,
    PlsError,
)
from pls.loaders.decoders import YamlFrontMatterDecoder, normalize_key
from pls.loaders.frontmatter import parse_front_matter, split_front_matter
from pls.models.front_matter import TemplateFrontMatter


class FrontMatter(BaseModel):
	title: str = ""


class AliasedFrontMatter(BaseModel):
	title: str = Field("", alias="Title")
	draft: bool = Field(False, alias="isDraft")


class RecordingDecoder:
	"""Decoder that keeps the raw block it was handed."""

	def __init__(self) -> None:
		self.calls: list[bytes] = []

	def decode(self, data: bytes, destination) -> None:
		self.calls.append(data)


class FailingLines:
	"""Line source that breaks after the first line."""

	def __iter__(self):
		yield "---\n"
		raise OSError("read failed")


# ---------------------------------------------------------------------------
# reference cases
# ---------------------------------------------------------------------------


def test_valid_yaml_front_matter():
	fm = FrontMatter()
	body = parse_front_matter(
	    "\n---\ntitle: Test Title\n---\nThis is the body text.", fm)
	assert body == "This is the body text.\n"
	assert fm.title == "Test Title"


def test_closing_delimiter_not_found():
	fm = FrontMatter()
	with pytest.raises(ClosingDelimiterNotFoundError):
		parse_front_matter("---\ntitle: Test Title\nThis is the body text.",
		                   fm)
	assert fm.title == ""


def test_no_front_matter():
	fm = FrontMatter(title="untouched")
	body = parse_front_matter("This is the body text.", fm)
	assert body == "This is the body text.\n"
	assert fm.title == "untouched"


def test_different_closing_delimiter():
	fm = FrontMatter()
	with pytest.raises(MismatchedDelimiterError) as exc_info:
		parse_front_matter("+++\ntitle: Test Title\n---\nThis is the body text.",
		                   fm)
	err = exc_info.value
	assert not isinstance(err, ClosingDelimiterNotFoundError)
	assert err.expected == "+++"
	assert err.found == "---"
	assert fm.title == ""


# ---------------------------------------------------------------------------
# scanning edge cases
# ---------------------------------------------------------------------------


class TestScanning:
	"""Line classification rules."""

	def test_plus_delimiters(self):
		fm = FrontMatter()
		body = parse_front_matter("+++\ntitle: Plus\n+++\nbody", fm)
		assert body == "body\n"
		assert fm.title == "Plus"

	def test_delimiters_in_body_are_kept(self):
		"""Only the first block is front matter."""
		meta, body = split_front_matter("---\na: 1\n---\nx\n---\ny\n+++\n")
		assert meta == {"a": 1}
		assert body == "x\n---\ny\n+++\n"

	def test_delimiter_after_content_is_body(self):
		fm = FrontMatter()
		body = parse_front_matter("hello\n---\ntitle: no\n---\n", fm)
		assert body == "hello\n---\ntitle: no\n---\n"
		assert fm.title == ""

	def test_leading_blank_lines_skipped(self):
		body = parse_front_matter("\n  \n\t\nhello\n\nworld", {})
		assert body == "hello\n\nworld\n"

	def test_blank_lines_after_block_kept(self):
		body = parse_front_matter("---\n---\n\nbody\n", {})
		assert body == "\nbody\n"

	def test_empty_input(self):
		fm = FrontMatter(title="keep")
		assert parse_front_matter("", fm) == ""
		assert fm.title == "keep"

	def test_only_blank_lines(self):
		assert parse_front_matter("\n\n   \n", {}) == ""

	def test_trailing_newline_not_doubled(self):
		assert parse_front_matter("a\nb\n", {}) == "a\nb\n"

	def test_crlf_line_endings(self):
		fm = FrontMatter()
		body = parse_front_matter("---\r\ntitle: CRLF\r\n---\r\nbody\r\n", fm)
		assert body == "body\n"
		assert fm.title == "CRLF"

	def test_delimiter_with_surrounding_whitespace(self):
		fm = FrontMatter()
		body = parse_front_matter("  ---  \ntitle: Padded\n\t---\nbody", fm)
		assert body == "body\n"
		assert fm.title == "Padded"

	def test_block_lines_are_not_trimmed(self):
		decoder = RecordingDecoder()
		parse_front_matter("---\n\nkey:\n  nested: 1\n---\n", {}, decoder)
		assert decoder.calls == [b"\nkey:\n  nested: 1\n"]

	def test_empty_block(self):
		decoder = RecordingDecoder()
		fm = FrontMatter(title="keep")
		body = parse_front_matter("---\n---\nbody", fm, decoder)
		assert body == "body\n"
		assert decoder.calls == [b""]
		assert fm.title == "keep"

	def test_decoder_not_called_without_front_matter(self):
		decoder = RecordingDecoder()
		parse_front_matter("just text", {}, decoder)
		assert decoder.calls == []

	def test_lone_opening_delimiter(self):
		with pytest.raises(ClosingDelimiterNotFoundError) as exc_info:
			parse_front_matter("\n---\n", {})
		assert exc_info.value.delimiter == "---"

	def test_longer_dash_runs_are_not_delimiters(self):
		body = parse_front_matter("----\ntext", {})
		assert body == "----\ntext\n"

	def test_idempotent_on_body(self):
		fm = FrontMatter()
		body = parse_front_matter("---\ntitle: T\n---\nline one\nline two", fm)
		again = FrontMatter(title="unchanged")
		assert parse_front_matter(body, again) == body
		assert again.title == "unchanged"


class TestLineSources:
	"""Documents supplied as iterables of lines."""

	def test_file_like_input(self):
		fm = FrontMatter()
		body = parse_front_matter(io.StringIO("---\ntitle: T\n---\nbody\n"), fm)
		assert body == "body\n"
		assert fm.title == "T"

	def test_list_of_lines(self):
		body = parse_front_matter(["---", "a: 1", "---", "b"], {})
		assert body == "b\n"

	def test_read_errors_propagate(self):
		with pytest.raises(OSError, match="read failed") as exc_info:
			parse_front_matter(FailingLines(), {})
		assert not isinstance(exc_info.value, PlsError)


# ---------------------------------------------------------------------------
# decoding
# ---------------------------------------------------------------------------


class TestDecoding:
	"""YAML decoding into models and mappings."""

	def test_unknown_keys_ignored(self):
		fm = FrontMatter()
		parse_front_matter("---\ntitle: T\nauthor: someone\n---\n", fm)
		assert fm.title == "T"
		assert not hasattr(fm, "author")

	def test_hyphenated_keys(self):
		fm = TemplateFrontMatter()
		parse_front_matter("---\nmax-tokens: 10\nTemperature: 0.5\n---\n", fm)
		assert fm.max_tokens == 10
		assert fm.temperature == 0.5

	def test_type_mismatch(self):
		fm = TemplateFrontMatter(model="keep")
		with pytest.raises(MetadataDecodeError) as exc_info:
			parse_front_matter("---\nmodel: other\ntemperature: hot\n---\n", fm)
		assert isinstance(exc_info.value.cause, ValidationError)
		assert exc_info.value.__cause__ is exc_info.value.cause
		assert fm.model == "keep"
		assert fm.temperature is None

	def test_out_of_range_value(self):
		with pytest.raises(MetadataDecodeError):
			parse_front_matter("---\ntemperature: 5\n---\n", TemplateFrontMatter())

	def test_yaml_syntax_error(self):
		with pytest.raises(MetadataDecodeError) as exc_info:
			parse_front_matter("---\ntitle: [unclosed\n---\nbody", FrontMatter())
		assert isinstance(exc_info.value.cause, yaml.YAMLError)
		assert isinstance(exc_info.value, FrontMatterError)

	def test_non_mapping_block(self):
		with pytest.raises(MetadataDecodeError):
			parse_front_matter("---\n- a\n- b\n---\nbody", {})

	def test_unsupported_destination(self):
		with pytest.raises(MetadataDecodeError) as exc_info:
			parse_front_matter("---\na: 1\n---\n", object())
		assert isinstance(exc_info.value.cause, TypeError)

	def test_mapping_destination(self):
		meta = {"existing": True}
		parse_front_matter("---\na: 1\nb-c: two\n---\n", meta)
		assert meta == {"existing": True, "a": 1, "b_c": "two"}

	def test_aliased_model_fields(self):
		fm = AliasedFrontMatter(Title="old", isDraft=True)
		body = parse_front_matter("---\ntitle: T\n---\nbody", fm)
		assert body == "body\n"
		assert fm.title == "T"
		assert fm.draft is True

	def test_aliased_model_type_mismatch(self):
		fm = AliasedFrontMatter()
		with pytest.raises(MetadataDecodeError):
			parse_front_matter("---\ndraft: [1, 2]\n---\n", fm)
		assert fm.draft is False

	def test_decoder_directly(self):
		fm = FrontMatter()
		YamlFrontMatterDecoder().decode(b"title: direct\n", fm)
		assert fm.title == "direct"

	def test_normalize_key(self):
		assert normalize_key(" Max-Tokens ") == "max_tokens"
		assert normalize_key(1) == "1"


def test_split_front_matter_without_block():
	meta, body = split_front_matter("plain")
	assert meta == {}
	assert body == "plain\n"
