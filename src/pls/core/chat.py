"""
Streaming chat completion client.

Wraps the OpenAI SDK's streaming chat completions behind a small
``Chat`` object that yields text chunks. The base request (model, token
limit, context messages) is fixed at construction and cloned for every
prompt; template front matter overrides it per call.
"""

from __future__ import annotations

import copy
from typing import Any, Iterable, Iterator

import openai
from openai import OpenAI

from pls.errors import ChatError
from pls.models.config import Config
from pls.models.front_matter import TemplateFrontMatter
from pls.utils.logging import get_logger

logger = get_logger(__name__)


def to_messages(role: str, messages: Iterable[str]) -> list[dict[str, str]]:
	"""Wrap plain strings as chat messages with the given role."""
	return [{"role": role, "content": m} for m in messages]


class Chat:
	"""Streaming chat client with a reusable base request."""

	def __init__(
	    self,
	    client: Any,
	    model: str,
	    max_tokens: int | None = None,
	    context_messages: Iterable[str] = (),
	) -> None:
		"""
		Initialize the chat client.

		Parameters:
			client: An ``openai.OpenAI`` client, or anything exposing
				``chat.completions.create``.
			model: Default model name.
			max_tokens: Default completion token limit.
			context_messages: User messages sent ahead of every prompt.
		"""
		self.client = client
		self.base_request: dict[str, Any] = {
		    "model": model,
		    "messages": to_messages("user", context_messages),
		}
		if max_tokens is not None:
			self.base_request["max_tokens"] = max_tokens

	def build_request(
	    self,
	    message: str,
	    front_matter: TemplateFrontMatter | None = None,
	) -> dict[str, Any]:
		"""
		Build a streaming request for one prompt.

		Parameters:
			message: The rendered prompt.
			front_matter: Per-template overrides.

		Returns:
			Keyword arguments for ``chat.completions.create``.
		"""
		req = copy.deepcopy(self.base_request)
		if front_matter is not None:
			if front_matter.temperature is not None:
				req["temperature"] = front_matter.temperature
			if front_matter.model:
				req["model"] = front_matter.model
			if front_matter.max_tokens is not None:
				req["max_tokens"] = front_matter.max_tokens
			if front_matter.system:
				req["messages"].insert(0, {
				    "role": "system",
				    "content": front_matter.system,
				})
		req["messages"].append({"role": "user", "content": message})
		req["stream"] = True
		return req

	def stream(
	    self,
	    message: str,
	    front_matter: TemplateFrontMatter | None = None,
	) -> Iterator[str]:
		"""
		Send the request for ``message`` and return its completion stream.

		The request is made before this returns, so a failing service is
		reported before any output is written. The returned iterator
		yields delta contents as they arrive, then a single trailing
		newline once the service ends the stream.

		Raises:
			ChatError: If the service request or stream fails.
		"""
		req = self.build_request(message, front_matter)
		logger.info("chat request: model=%s temperature=%s messages=%d",
		            req["model"], req.get("temperature"), len(req["messages"]))
		try:
			response = self.client.chat.completions.create(**req)
		except openai.OpenAIError as exc:
			raise ChatError(f"chat request failed: {exc}") from exc
		return _iter_deltas(response)


def _iter_deltas(response: Any) -> Iterator[str]:
	"""Yield the text deltas of a streamed response, closing it when done."""
	try:
		for chunk in response:
			if not chunk.choices:
				continue
			content = chunk.choices[0].delta.content
			if content:
				yield content
	except openai.OpenAIError as exc:
		raise ChatError(f"chat stream failed: {exc}") from exc
	finally:
		close = getattr(response, "close", None)
		if close is not None:
			close()
	yield "\n"


def create_chat(config: Config) -> Chat:
	"""Factory for Chat backed by an OpenAI client built from config."""
	try:
		client = OpenAI(
		    api_key=config.api_key,
		    base_url=config.base_url,
		    timeout=config.request_timeout_seconds,
		)
	except openai.OpenAIError as exc:
		# raised when no API key is configured
		raise ChatError(str(exc)) from exc
	return Chat(
	    client,
	    model=config.model,
	    max_tokens=config.max_tokens,
	    context_messages=config.context_messages,
	)


__all__ = ["Chat", "create_chat", "to_messages"]
