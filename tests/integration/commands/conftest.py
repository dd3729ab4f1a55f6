from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from rich.console import Console

from specgraph.cli import CLIContext, create_app
from specgraph.spec import EntitySnapshot, JsonEntityStore


@pytest.fixture
def specs_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, corpus: EntitySnapshot
) -> Generator[Path]:
    """A specs directory holding the shared corpus, with the cwd at its parent."""
    monkeypatch.chdir(tmp_path)
    store = JsonEntityStore(tmp_path / "specs")
    for entity in corpus:
        store.save_entity(entity)
    yield tmp_path / "specs"
    CLIContext.reset()


@pytest.fixture
def specgraph_cli(console: Console) -> Callable[..., None]:
    """Create CLI app for testing.

    Returns a callable that runs the CLI and suppresses SystemExit.
    Use specgraph_cli_with_exit_code when you need to check the exit code.
    """

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> None:
        """Run CLI app and suppress SystemExit from cyclopts."""

        try:
            app.meta(list(args))
        except SystemExit:
            pass

    return _run


@pytest.fixture
def specgraph_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code.

    Use this fixture when tests need to verify the exit code.
    """

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        """Run CLI app and return exit code (0 if no SystemExit)."""

        try:
            app.meta(list(args))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
