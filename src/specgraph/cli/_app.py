"""The command-line interface for specgraph."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from specgraph.config import SpecGraphConfig
from specgraph.exceptions import ConfigError
from specgraph.utils import create_cli_logger

from ._commands import register_commands
from ._commands._context import DEFAULT_SPECS_DIR, CLIContext, OutputFormat
from ._commands._shared import ExitCode, exit_with_error

__all__ = ["DEFAULT_CONFIG_FILE", "app", "create_app", "main"]

DEFAULT_CONFIG_FILE = Path("specgraph.toml")

_HELP = "Consistency engine for specification graphs."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the CLI app.

    Invoke it through ``app.meta`` so the global options are parsed and the
    CLI context is set before a command runs.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="specgraph",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        specs_dir: Annotated[
            Path, Parameter(name="--specs-dir", help="Directory holding the entity files")
        ] = DEFAULT_SPECS_DIR,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
        format_: Annotated[
            OutputFormat, Parameter(name=["--format", "-f"], help="Output format")
        ] = OutputFormat.TABLE,
        verbose: Annotated[bool, Parameter(help="Log at debug level")] = False,
    ) -> None:
        """Launch specgraph with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            specs_dir: Directory holding the entity files.
            config: Explicit path to config file.
            format_: Output format for every command.
            verbose: Log at debug level.
        """
        config_path = config
        if config_path is None and DEFAULT_CONFIG_FILE.is_file():
            config_path = DEFAULT_CONFIG_FILE

        try:
            loaded_config = SpecGraphConfig.load(config_path)
        except ConfigError as e:
            exit_with_error(str(e), ExitCode.LOAD_ERROR, console=error_console)

        # Create CLI logger from config settings
        cli_logger = create_cli_logger(
            level="debug" if verbose else loaded_config.logging.level.value,
            log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
            log_file=loaded_config.logging.file,
            command=tokens[0] if tokens else "",
        )

        ctx = CLIContext(
            config=loaded_config,
            specs_dir=specs_dir,
            output_format=format_,
            logger=cli_logger,
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `specgraph` CLI."""
    app.meta()


if __name__ == "__main__":
    main()
