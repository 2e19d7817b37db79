"""Pipeline output emitters for GitHub Actions style runners."""

import sys
from typing import TextIO


def format_set_output(name: str, value: object) -> str:
    """Render the workflow command that sets a step output."""
    return f"::set-output name={name}::{value}"


def emit_output(
    name: str,
    value: object,
    stream: TextIO | None = None,
    github_output: str | None = None,
) -> None:
    """
    Publish a step output.

    When the runner exposes a GITHUB_OUTPUT file, `name=value` is appended to
    it first, so an OSError from that file leaves `stream` untouched. The
    `::set-output` command is then written to `stream` (stdout by default).
    """
    if github_output:
        with open(github_output, "a", encoding="utf-8") as gh_out:
            gh_out.write(f"{name}={value}\n")

    stream = stream if stream is not None else sys.stdout
    stream.write(format_set_output(name, value) + "\n")
    stream.flush()
