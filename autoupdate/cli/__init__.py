"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from autoupdate.cli._create_app import _create_app
    from autoupdate.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from autoupdate.api.config.get_package_version import get_package_version

        print(f"autoupdate {get_package_version()}")
        return 0

    configure_logging()
    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
