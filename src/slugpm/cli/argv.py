"""
Argv preprocessor for forgiving CLI flag and command handling.

Normalizes sys.argv before Typer parses it, handling common user patterns:
- ``slugpm --version`` → ``slugpm version``
- ``slugpm help archive`` → ``slugpm archive --help``
- ``slugpm name x --debug`` → ``slugpm --debug name x``
- ``slugpm My Project`` → ``slugpm create My Project``
"""

COMMANDS = frozenset({"archive", "create", "name", "version"})
DEFAULT_COMMAND = "create"

_GLOBAL_FLAGS = {"--debug"}
_GLOBAL_OPTIONS_WITH_VALUE = {"-C", "--directory", "--max-length"}
_HELP_FLAGS = {"--help", "-h"}


def preprocess_argv(argv: list[str]) -> list[str]:
    """Normalize CLI arguments for Typer compatibility.

    Applied rules (in order):
    1. ``--version`` / ``-V`` as first arg → ``version`` subcommand
    2. ``help`` pseudo-command → ``--help`` appended to subcommands
    3. Global flags hoisted before the subcommand
    4. ``create`` inserted when no known subcommand is given
    """
    # Rule 1: --version / -V at top level → version subcommand
    if argv and argv[0] in ("--version", "-V"):
        return ["version"]

    # Rule 2: help pseudo-command → --help
    if argv and argv[0] == "help":
        return _rewrite_help(argv[1:])

    # Rule 3: hoist global flags
    argv = _hoist_global_flags(argv)

    # Rule 4: default command
    return _insert_default_command(argv)


def _rewrite_help(rest: list[str]) -> list[str]:
    """Rewrite ``help [subcmd]`` into ``[subcmd] --help``.

    Takes the first non-flag, non-"help" token as the subcommand.
    """
    for token in rest:
        if token.startswith("-") or token == "help":
            continue
        return [token, "--help"]
    return ["--help"]


def _hoist_global_flags(argv: list[str]) -> list[str]:
    """Move global flags (e.g. ``--debug``) before the subcommand."""
    hoisted: list[str] = []
    rest: list[str] = []
    seen: set[str] = set()
    for token in argv:
        if token in _GLOBAL_FLAGS:
            if token not in seen:
                hoisted.append(token)
                seen.add(token)
            # Drop duplicates entirely
        else:
            rest.append(token)
    return [*hoisted, *rest]


def _insert_default_command(argv: list[str]) -> list[str]:
    """Insert ``create`` before the first positional token unless it is a command.

    Leading global options (and their values) are skipped. A bare help flag
    among them leaves argv alone so top-level help still works.
    """
    i = 0
    while i < len(argv):
        token = argv[i]
        if token in _HELP_FLAGS:
            return argv
        if token in _GLOBAL_OPTIONS_WITH_VALUE:
            i += 2
            continue
        if token not in ("-", "--") and token.startswith("-"):
            # --debug, --directory=path, unknown options: let Typer judge
            i += 1
            continue
        break

    if i < len(argv) and argv[i] in COMMANDS:
        return argv
    return [*argv[:i], DEFAULT_COMMAND, *argv[i:]]
