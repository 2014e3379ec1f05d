"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from template_data_docs.run_execution import (
    RenderExecutionError,
    RenderRequest,
    execute_render_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="template-data-docs")
@click.option(
    "--settings",
    "settings_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML file overriding the title and fixed prose",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Log rendering progress to stderr.",
)
def cli(settings_path: str | None, verbose: bool) -> None:
    """Render the template data schema on stdin as a Markdown reference on stdout."""
    if verbose:
        _configure_logging()
    schema_text = click.get_binary_stream("stdin").read()
    try:
        outcome = execute_render_run(
            RenderRequest(schema_text=schema_text, settings_path=settings_path)
        )
    except RenderExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(outcome.text, nl=False)


def _configure_logging() -> None:
    package_logger = logging.getLogger("template_data_docs")
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
