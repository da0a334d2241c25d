"""Create the main Typer CLI app."""

import typer

from autoupdate.api.service.cmd_delete import cmd_delete
from autoupdate.api.service.cmd_start import cmd_start
from autoupdate.api.service.cmd_status import cmd_status
from autoupdate.api.service.cmd_stop import cmd_stop
from autoupdate.cli._handle_stage_result import _handle_stage_result


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="autoupdate",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Automatically update Homebrew in the background",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
        add_completion=False,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        verbose: bool = typer.Option(False, "--verbose", help="Show progress of each step"),
    ) -> None:
        ctx.ensure_object(dict)
        ctx.obj["verbose"] = verbose

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="start")
    def start_cmd(
        upgrade: bool = typer.Option(False, "--upgrade", help="Also upgrade installed formulae"),
        cleanup: bool = typer.Option(False, "--cleanup", help="Clean up old versions after upgrading"),
        greedy: bool = typer.Option(False, "--greedy", help="Also upgrade self-updating casks"),
    ) -> None:
        """Start autoupdating Homebrew every 24 hours and at login."""
        _handle_stage_result(cmd_start)(upgrade=upgrade, cleanup=cleanup, greedy=greedy)

    @app.command(name="status")
    def status_cmd() -> None:
        """Show whether autoupdate is running and how it was started."""
        _handle_stage_result(cmd_status)()

    @app.command(name="stop")
    def stop_cmd() -> None:
        """Stop autoupdating, keeping the installed files."""
        _handle_stage_result(cmd_stop)()

    @app.command(name="delete")
    def delete_cmd() -> None:
        """Stop autoupdating and remove the installed files."""
        _handle_stage_result(cmd_delete)()

    return app
