"""Dispatch of lookup modes to handlers and rendering of their results."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import IO, Callable, Dict, Optional

from rich.markup import escape

from .categories import Category, classify
from .configuration.loader import BINARY_ENV as BUILTIN_TYPE_ENV
from .logging import make_console
from .lookup import first_line, lookup_all

DEFAULT_BINARY = "/usr/bin/type"


class CmdtypeError(RuntimeError):
    pass


class BinaryNotConfiguredError(CmdtypeError):
    def __init__(self) -> None:
        super().__init__(f"lookup binary is not configured (set {BUILTIN_TYPE_ENV})")


class UndefinedFlagError(CmdtypeError):
    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"{flag}:flag undefined")


class Mode(str, Enum):
    TYPE = "type"
    ALL = "all"
    PATH = "path"

    def __str__(self) -> str:
        return self.value


SHORT_FLAGS: Dict[str, Mode] = {
    "-t": Mode.TYPE,
    "-a": Mode.ALL,
    "-p": Mode.PATH,
}

Handler = Callable[[str], str]


def get_env_or(key: str, default: str = "") -> str:
    return os.environ.get(key) or default


def short_to_long(flag: str) -> str:
    mode = SHORT_FLAGS.get(flag.lower())
    return mode.value if mode else flag


@dataclass
class Result:
    output: str = ""
    error: Optional[Exception] = None

    def get(self) -> str:
        return self.output

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def consume(self, handler: Optional[Callable[[str], bool]]) -> bool:
        """Pass the output to ``handler`` unless the result carries an error."""
        if self.has_error or handler is None:
            return False
        return handler(self.output)


class Runner:
    """Resolve a command through the lookup binary in one of three modes."""

    def __init__(
        self,
        err: Optional[IO[str]] = None,
        input: Optional[IO[str]] = None,
        output: Optional[IO[str]] = None,
        *,
        binary: Optional[str] = None,
    ) -> None:
        self.binary = (
            binary if binary is not None else get_env_or(BUILTIN_TYPE_ENV, DEFAULT_BINARY)
        )
        self.handlers: Dict[Mode, Handler] = {
            Mode.TYPE: self.type_of,
            Mode.ALL: self.all_of,
            Mode.PATH: self.path_of,
        }
        self.set_streams(err, input, output)

    def set_streams(
        self,
        err: Optional[IO[str]] = None,
        input: Optional[IO[str]] = None,
        output: Optional[IO[str]] = None,
    ) -> "Runner":
        self.err = err
        self.input = input
        self.output = output
        self._err_console = make_console(err)
        return self

    def bind(self, binary: str) -> "Runner":
        """Point the runner at another lookup binary.

        The path is made absolute and must name an existing file; otherwise the error is
        logged and the current binding is kept.
        """
        if not binary:
            return self
        try:
            path = os.path.abspath(binary)
        except OSError as exc:
            self._log_error(f"ERROR: {exc}")
            return self
        if not os.path.isfile(path):
            self._log_error(f"ERROR: no such file: {path}")
            return self
        self.binary = path
        return self

    def exec(self, flag: str, command: str) -> Result:
        result = Result()
        if not self.binary:
            result.error = BinaryNotConfiguredError()
            self._log_error(f"cmd err: {result.error}")
            return result
        if not command:
            return result
        if flag.startswith("-"):
            flag = short_to_long(flag)
        try:
            handler = self.handlers[Mode(flag)]
        except ValueError:
            result.error = UndefinedFlagError(flag)
            self._log_error(f"cmd err: {result.error}")
            self._write(result.output)
            return result
        result.output = handler(command)
        self._write(result.output)
        return result

    def type_of(self, command: str) -> str:
        ok, raw = lookup_all(self.binary, command)
        if not ok or not raw:
            return Category.UNFOUND.value
        return classify(first_line(raw)).value

    def all_of(self, command: str) -> str:
        ok, raw = lookup_all(self.binary, command)
        if not ok:
            return f"{command} not found"
        return raw

    def path_of(self, command: str) -> str:
        ok, raw = lookup_all(self.binary, command)
        if not ok:
            return ""
        lines = raw.splitlines()
        if not lines or classify(lines[0]) is not Category.FILE:
            return ""
        line = lines[0] if len(lines) < 2 else lines[1]
        segments = line.split("is")
        if len(segments) < 2:
            return ""
        return segments[1].strip()

    def _write(self, text: str) -> None:
        stream = self.output if self.output is not None else sys.stdout
        stream.write(text if text.endswith("\n") else text + "\n")
        stream.flush()

    def _log_error(self, message: str) -> None:
        self._err_console.print(f"[error]{escape(message)}[/]")
