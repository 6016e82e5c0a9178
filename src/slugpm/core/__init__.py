"""
Core logic for slugpm.

Nothing in here reads process state (cwd, stdin, tty) or prints. Filesystem
mutations go through an injected ``FileOps`` implementation.
"""
