"""Run a chain of commands between an input file and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable, Sequence
from contextlib import suppress

from minish.environ import key_of, value_part
from minish.linereader import LineReader

HERE_DOC = "here_doc"
FAILURE_STATUS = 255


class PipexError(Exception):
    """Raised when a file cannot be opened or the arguments are wrong."""


def env_value(key: str, env: Sequence[str]) -> str | None:
    """Return the value of the entry whose key is exactly ``key``, or None."""
    for entry in env:
        if key_of(entry) == key:
            return value_part(entry)
    return None


def _words(cmd: str) -> list[str]:
    return [word for word in cmd.split(" ") if word]


def resolve_command(cmd: str, env: Sequence[str]) -> str:
    """Return the executable on ``PATH`` for the first word of ``cmd``.

    ``cmd`` itself is returned when no executable is found.
    """
    words = _words(cmd)
    search = env_value("PATH", env)
    if not words or search is None:
        return cmd
    for directory in (part for part in search.split(":") if part):
        candidate = f"{directory}/{words[0]}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return cmd


def open_infile(path: str) -> int:
    """Open ``path`` for reading and return its descriptor."""
    try:
        return os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise PipexError("Error : cannot open infile") from exc


def open_outfile(path: str, append: bool = False) -> int:
    """Open ``path`` for writing, truncating it or appending to it."""
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        return os.open(path, flags, 0o644)
    except OSError as exc:
        raise PipexError("Error : cannot create or write in outfile") from exc


def read_here_doc(limiter: str, source: Iterable[str], path: str) -> bool:
    """Append lines of ``source`` to ``path`` until one starts with ``limiter``.

    Returns True when the limiter was met, False when the input ran out first.
    """
    fd = open_outfile(path, append=True)
    with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape") as out:
        for line in source:
            if line.startswith(limiter):
                return True
            out.write(line)
    return False


def _as_mapping(env: Sequence[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in env:
        key = key_of(entry)
        value = value_part(entry)
        if key is not None and value is not None:
            mapping[key] = value
    return mapping


def _run(
    cmd: str,
    env: Sequence[str],
    mapping: dict[str, str],
    stdin_fd: int | None,
    data: bytes | None,
    stdout,
) -> tuple[int, bytes]:
    """Run one command; a command that cannot start reports and gives status 1."""
    words = _words(cmd)
    try:
        if not words:
            raise FileNotFoundError(2, os.strerror(2))
        path = resolve_command(words[0], env)
        if "/" not in path:
            path = f"./{path}"
        if data is not None:
            result = subprocess.run(
                words, executable=path, input=data, stdout=stdout, env=mapping, check=False
            )
        else:
            result = subprocess.run(
                words, executable=path, stdin=stdin_fd, stdout=stdout, env=mapping, check=False
            )
    except OSError as exc:
        sys.stderr.write(f"Error : processus cannot be executed : {exc.strerror}\n")
        return 1, b""
    return result.returncode, result.stdout or b""


def run_pipeline(
    infile: str,
    commands: Sequence[str],
    outfile: str,
    env: Sequence[str],
    append: bool = False,
) -> int:
    """Feed ``infile`` through ``commands`` into ``outfile``.

    Returns the exit status of the last command.
    """
    if not commands:
        raise PipexError("Error : incorrect number of arguments")
    out_fd = open_outfile(outfile, append)
    try:
        in_fd = open_infile(infile)
    except PipexError:
        os.close(out_fd)
        raise
    mapping = _as_mapping(env)
    try:
        data: bytes | None = None
        for cmd in commands[:-1]:
            _, data = _run(cmd, env, mapping, in_fd, data, subprocess.PIPE)
        status, _ = _run(commands[-1], env, mapping, in_fd, data, out_fd)
        return status
    finally:
        os.close(in_fd)
        os.close(out_fd)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        sys.stderr.write("Error : incorrect number of arguments\n")
        return FAILURE_STATUS
    env = [f"{key}={value}" for key, value in os.environ.items()]
    try:
        if HERE_DOC.startswith(args[0]):
            limiter = args[1]
            read_here_doc(limiter, LineReader(0), limiter)
            try:
                return run_pipeline(limiter, args[2:-1], args[-1], env, append=True)
            finally:
                with suppress(FileNotFoundError):
                    os.unlink(limiter)
        return run_pipeline(args[0], args[1:-1], args[-1], env)
    except PipexError as exc:
        sys.stderr.write(f"{exc}\n")
        return FAILURE_STATUS


if __name__ == "__main__":
    sys.exit(main())