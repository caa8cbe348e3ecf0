"""
pls models.

This subpackage contains Pydantic models for configuration, run
parameters, and template front matter.

Key models:
    - Config: Application configuration loaded from environment
    - RunParams: Parameters for a single CLI run
    - TemplateFrontMatter: Generation settings declared by a template
"""

from .config import Config, load_env
from .run_params import RunParams, STDOUT_MARKER
from .front_matter import TemplateFrontMatter

__all__ = [
    "Config",
    "load_env",
    "RunParams",
    "STDOUT_MARKER",
    "TemplateFrontMatter",
]
