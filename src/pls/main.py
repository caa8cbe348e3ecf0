from __future__ import annotations

import sys
from typing import Optional

import typer
from pydantic import ValidationError
from typer.main import get_command

from pls.core.chat import create_chat
from pls.core.runner import Runner
from pls.errors import PlsError
from pls.models.config import Config, load_env
from pls.models.run_params import RunParams
from pls.ui.output import print_error
from pls.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

cli = typer.Typer(add_completion=False, no_args_is_help=True)


@cli.callback()
def root() -> None:
	"""
	Root callback for the pls CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def run_impl(
    prompt_file: str,
    input_file: str | None = None,
    output_file: str | None = None,
    print_prompt: bool = False,
    replace_input_file: bool = False,
    no_input: bool = False,
    model: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
    log_level: str | None = None,
) -> None:
	"""
	Render a prompt template and stream its completion.

	Loads configuration, validates the run parameters, and hands off to
	the Runner. Known failures are printed and exit with status 1.
	"""
	load_env()
	try:
		params = RunParams(
		    prompt_file=prompt_file,
		    input_file=input_file,
		    output_file=output_file,
		    print_prompt=print_prompt,
		    replace_input_file=replace_input_file,
		    no_input=no_input,
		    model=model,
		    temperature=temperature,
		    max_tokens=max_tokens,
		    log_level=log_level,
		)
		config = Config()
	except ValidationError as exc:
		print_error(exc)
		raise typer.Exit(code=1) from exc
	config.apply_overrides(params)
	configure_logging(config.log_level)
	logger.debug("run params: %s", params.model_dump(exclude_none=True))

	try:
		chat = None if params.print_prompt else create_chat(config)
		Runner(params, chat).run()
	except (PlsError, OSError) as exc:
		print_error(exc)
		raise typer.Exit(code=1) from exc


@cli.command()
def run(
    prompt_file: str = typer.Argument(..., help="prompt template file"),
    input_file: Optional[str] = typer.Argument(
        None, help="input file to embed into the prompt"),
    output_file: Optional[str] = typer.Argument(
        None, help="output file. Use - for stdout"),
    print_prompt: bool = typer.Option(
        False, "-p", "--prompt",
        help="print the rendered prompt for copy-paste"),
    replace_input_file: bool = typer.Option(
        False, "-r", "--replace", help="inplace rewrite of the input file"),
    no_input: bool = typer.Option(
        False, "-n", "--no-input", help="use the prompt directly with no input"),
    model: Optional[str] = typer.Option(None, "--model",
                                        help="Override model"),
    temperature: Optional[float] = typer.Option(
        None, "-t", "--temperature", help="Override sampling temperature"),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens",
                                             help="Override max tokens"),
    log_level: Optional[str] = typer.Option(None, "--log-level",
                                            help="Override log level"),
) -> None:
	"""
	Render PROMPT_FILE with INPUT_FILE (or stdin) and stream the completion.

	Front matter at the head of the prompt file sets generation options.
	"""
	run_impl(prompt_file, input_file, output_file, print_prompt,
	         replace_input_file, no_input, model, temperature, max_tokens,
	         log_level)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `run` when appropriate.

	Allows calling 'pls prompt.md input.txt' without explicitly
	specifying the 'run' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	# allow optional `run` prefix; default to run unless asking for top-level help
	if args and args[0] == "run":
		args = args[1:]
	if args and args[0] not in commands and args[0] not in ("--help", "-h"):
		args = ["run"] + args
	return _click_app.main(
	    args=args,
	    prog_name="pls",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
