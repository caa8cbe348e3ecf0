"""
Prompt template rendering.

A prompt template is a text document with optional front matter. The
body may reference the input document as ``$input`` or ``${input}``::

    ---
    temperature: 0.2
    ---
    Fix the grammar of the following text.
    ---
    ${input}

Only the first delimited block at the head of the file is front matter;
later delimiter lines belong to the prompt.
"""

from __future__ import annotations

from string import Template

from pydantic import BaseModel

from pls.loaders.frontmatter import parse_front_matter
from pls.models.front_matter import TemplateFrontMatter
from pls.utils.logging import get_logger

logger = get_logger(__name__)


class TemplateData(BaseModel):
	"""Values available to a prompt template."""

	input: str = ""


def render_template(
        prompt_template: str,
        data: TemplateData) -> tuple[str, TemplateFrontMatter]:
	"""
	Split the front matter off a template and substitute its body.

	Parameters:
		prompt_template: Raw template text.
		data: Values to substitute.

	Returns:
		Tuple of (rendered prompt, decoded front matter).

	Raises:
		FrontMatterError: If the front matter block is malformed.
	"""
	fm = TemplateFrontMatter()
	body = parse_front_matter(prompt_template, fm)
	rendered = Template(body).safe_substitute(data.model_dump())
	logger.debug("rendered template: %d chars, front matter=%s",
	             len(rendered), fm.model_dump(exclude_none=True))
	return rendered, fm


__all__ = ["TemplateData", "render_template"]
