"""Version lookup for intcalc, shared by ``intcalc.__version__`` and ``intcalc --version``."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

# src/intcalc/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Version of a source checkout's pyproject.toml, else of the installed dist.

    The checkout file is only trusted when its [project] table names intcalc,
    so an unrelated pyproject.toml next to site-packages is ignored.
    """
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as fh:
            project = tomllib.load(fh).get("project", {})
        if project.get("name") == "intcalc" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("intcalc")
    except PackageNotFoundError:
        return "0.0.0"
