from __future__ import annotations

import os
import subprocess
from typing import List, Tuple

LOOKUP_ALL_FLAG = "-a"


def lookup_args(binary: str, command: str) -> List[str]:
    return [binary, LOOKUP_ALL_FLAG, command]


def lookup_all(binary: str, command: str) -> Tuple[bool, str]:
    """Run ``<binary> -a <command>`` and return ``(ok, stdout)``.

    Only stdout is kept, and bytes that are not valid UTF-8 are replaced.
    A binary that cannot be executed or a non-zero exit is reported as
    ``(False, "")``; callers turn that into a "not found" style answer
    rather than an error.
    """
    try:
        proc = subprocess.run(
            lookup_args(binary, command),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
            check=True,
            env=dict(os.environ),
        )
    except (OSError, subprocess.CalledProcessError):
        return False, ""
    return True, proc.stdout or ""


def first_line(raw: str) -> str:
    return raw.split("\n", 1)[0]
