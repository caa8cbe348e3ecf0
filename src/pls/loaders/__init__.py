"""File and resource loading utilities.

This subpackage handles reading prompt templates, input documents,
and the front matter block at the head of a template.

Key modules:
    - frontmatter: Front matter splitting
    - decoders: YAML decoding of front matter blocks
    - prompts: Prompt template and input loading
"""

from .decoders import YamlFrontMatterDecoder, normalize_key
from .frontmatter import parse_front_matter, split_front_matter
from .prompts import load_prompt, read_input

__all__ = [
    "YamlFrontMatterDecoder",
    "normalize_key",
    "parse_front_matter",
    "split_front_matter",
    "load_prompt",
    "read_input",
]
