"""cmdtype project metadata."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.10 fallback
    import tomli as tomllib  # type: ignore

PROJECT_NAME = "cmdtype"
PYPROJECT_PATH = Path(__file__).resolve().parent.parent / "pyproject.toml"
DEFAULT_DESCRIPTION = (
    "Report whether a command is an alias, keyword, function, builtin or file."
)


def _project_metadata() -> Dict[str, Any]:
    try:
        metadata = importlib_metadata.metadata(PROJECT_NAME)
        return {"version": metadata["Version"], "description": metadata["Summary"]}
    except importlib_metadata.PackageNotFoundError:  # pragma: no cover - dev checkout
        if not PYPROJECT_PATH.exists():
            return {}
        with PYPROJECT_PATH.open("rb") as fh:
            return tomllib.load(fh).get("project", {})


_META = _project_metadata()
__version__ = _META.get("version") or "0.0.0"
__description__ = _META.get("description") or DEFAULT_DESCRIPTION

__all__ = ["__version__", "__description__"]
