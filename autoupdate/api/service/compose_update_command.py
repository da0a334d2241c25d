"""Build the chained brew command the launcher runs."""

from .UpdateOptions import UpdateOptions


def compose_update_command(brew: str, options: UpdateOptions) -> str:
    """Join the brew invocations for ``options`` with ``&&``.

    ``update`` always runs. The upgrade, greedy cask upgrade and cleanup
    steps follow in that fixed order, and the last two are only added when
    ``upgrade`` is requested.
    """
    commands = [f"{brew} update"]
    if options.upgrade:
        commands.append(f"{brew} upgrade -v")
        if options.greedy:
            commands.append(f"{brew} upgrade --cask -v --greedy")
        if options.cleanup:
            commands.append(f"{brew} cleanup")
    return " && ".join(commands)
