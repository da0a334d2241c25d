"""Guess the start options from the launcher's command line."""

# Substrings written by compose_update_command, paired with the flag that produced them
_FLAG_TOKENS: tuple[tuple[str, str], ...] = (
    ("--upgrade", "brew upgrade -v"),
    ("--greedy", "--greedy"),
    ("--cleanup", "brew cleanup"),
)


def reconstruct_flags(command: str | None) -> list[str]:
    """Return the flags whose command text appears in ``command``.

    This is a textual match against what ``start`` writes today; a launcher
    written with different command text will not be recognised.
    """
    if not command:
        return []
    return [flag for flag, token in _FLAG_TOKENS if token in command]
