"""Core prompt processing.

This subpackage renders prompt templates, streams completions, and
orchestrates a single CLI run.

Key modules:
    - template: Front matter aware template rendering
    - chat: Streaming chat completion client
    - runner: Run orchestration via Runner
"""

from pls.core.template import TemplateData, render_template
from pls.core.chat import Chat, create_chat
from pls.core.runner import Runner

__all__ = [
    # template
    "TemplateData",
    "render_template",
    # chat
    "Chat",
    "create_chat",
    # runner
    "Runner",
]
