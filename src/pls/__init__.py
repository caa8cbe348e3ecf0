"""
pls - render prompt templates and stream their completions.

Prompt templates may carry generation settings in a front matter block
at the head of the file.

Main entry points:
    - pls.main: CLI entrypoint
    - pls.loaders.frontmatter: parse_front_matter() for splitting documents
    - pls.core.runner: Runner for a single prompt run
    - pls.models.config: Config and load_env()
"""
