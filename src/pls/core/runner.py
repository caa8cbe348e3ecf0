"""
Run orchestration.

The ``Runner`` ties one CLI invocation together: render the prompt
template with its input, then either hand the prompt to the user or
stream a completion to stdout or into a file.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import IO, Callable, Iterable, Iterator

from rich.console import Console

from pls.core.template import TemplateData, render_template
from pls.errors import ChatError
from pls.loaders.prompts import load_prompt, read_input
from pls.models.front_matter import TemplateFrontMatter
from pls.models.run_params import RunParams
from pls.ui.output import copy_to_clipboard, print_status
from pls.utils.files import backup_file, tee_to_file
from pls.utils.logging import get_logger
from pls.utils.protocols import ChatClientProtocol

logger = get_logger(__name__)


class Runner:
	"""Execute a single prompt run."""

	def __init__(
	    self,
	    params: RunParams,
	    chat: ChatClientProtocol | None = None,
	    *,
	    stdin: IO[str] | None = None,
	    stdout: IO[str] | None = None,
	    copy: Callable[[str], None] = copy_to_clipboard,
	    console: Console | None = None,
	) -> None:
		"""
		Initialize the runner.

		Parameters:
			params: Validated run parameters.
			chat: Chat client; only needed when a completion is requested.
			stdin: Input stream used when no input file is given.
			stdout: Stream for the prompt or the completion.
			copy: Clipboard copy function.
			console: Console for status notices; defaults to stderr.
		"""
		self.params = params
		self.chat = chat
		self.stdin = stdin if stdin is not None else sys.stdin
		self.stdout = stdout if stdout is not None else sys.stdout
		self.copy = copy
		self.console = console

	def render_prompt(self) -> tuple[str, TemplateFrontMatter]:
		"""Load the template and the input, and render the prompt."""
		prompt = load_prompt(self.params.prompt_file)

		text = ""
		if not self.params.no_input:
			text = read_input(self.params.input_file, self.stdin)

		rendered, front_matter = render_template(prompt,
		                                         TemplateData(input=text))
		for name in ("model", "temperature", "max_tokens"):
			value = getattr(self.params, name)
			if value is not None:
				setattr(front_matter, name, value)
		return rendered, front_matter

	def output_stream(self, prompt: str,
	                  front_matter: TemplateFrontMatter) -> Iterator[str]:
		"""
		Send the chat request and return its completion stream.

		Called before any output file is backed up or truncated, so a
		failing request leaves the target untouched.
		"""
		if self.chat is None:
			raise ChatError("no chat client configured")
		return iter(self.chat.stream(prompt, front_matter))

	def replace_file(self, stream: Iterable[str],
	                 output_file: str | Path) -> Path | None:
		"""
		Replace a file's contents with the stream, keeping a backup.

		The stream is echoed to stdout while it is written. A file that
		does not exist yet is created without a backup.

		Parameters:
			stream: Completion chunks.
			output_file: File to overwrite.

		Returns:
			Path of the backup copy, or None when nothing was backed up.
		"""
		backup = None
		if Path(output_file).exists():
			backup = backup_file(output_file)
		with Path(output_file).open("w", encoding="utf-8") as fp:
			written = tee_to_file(stream, fp, echo=self.stdout)
		logger.info("wrote %d chars to %s", written, output_file)
		return backup

	def run(self) -> None:
		"""Render the prompt and route it to the requested output."""
		prompt, front_matter = self.render_prompt()

		if self.params.print_prompt:
			self.stdout.write(prompt + "\n")
			self.copy(prompt)
			print_status("[copied to clipboard]", self.console)
			return

		stream = self.output_stream(prompt, front_matter)
		target = self.params.target_file
		if target is None:
			logger.info("streaming completion to stdout")
			for chunk in stream:
				self.stdout.write(chunk)
				self.stdout.flush()
			return

		self.replace_file(stream, target)


__all__ = ["Runner"]
