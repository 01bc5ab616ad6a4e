"""Reset a submission workspace from its templates."""

from __future__ import annotations

from pathlib import Path

TEMPLATES = (("templateC++.txt", "sourcecode.cpp"), ("templatePy.txt", "sourcecode.py"))
SCRATCH_FILES = ("output.out", "input.in")


def copy_template(source: str | Path, destination: str | Path) -> bool:
    """Copy ``source`` line by line into ``destination``; False if it could not be read.

    The destination is truncated either way.
    """
    try:
        lines = Path(source).read_bytes().splitlines()
    except OSError:
        lines = None
    Path(destination).write_bytes(b"".join(line + b"\n" for line in lines or ()))
    return lines is not None


def reset_submission(directory: str | Path = ".") -> None:
    """Rewrite the source files from their templates and empty the I/O files."""
    directory = Path(directory)
    for template, target in TEMPLATES:
        copy_template(directory / template, directory / target)
    for name in SCRATCH_FILES:
        (directory / name).write_bytes(b"")


def main(argv: list[str] | None = None) -> int:
    """Reset the workspace in the given directory and report it."""
    reset_submission(argv[0] if argv else ".")
    print("\nI/O Files have Been Cleaned..\n")
    print("Templates have been re-written..")
    return 0