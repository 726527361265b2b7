"""Traffic collector plugin for shadowsocks managed by a remote ssmgr host."""

import pathlib
import sys
from importlib.metadata import PackageNotFoundError, version

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DISTRIBUTION_NAME = "ssmgr-collector"


def _source_tree_version() -> str | None:
    # src/ssmgr_collector/__init__.py -> project root
    pyproject_path = pathlib.Path(__file__).resolve().parents[2] / "pyproject.toml"
    if not pyproject_path.is_file():
        return None
    with pyproject_path.open("rb") as f:
        project = tomllib.load(f).get("project", {})
    if project.get("name") != DISTRIBUTION_NAME:
        return None
    return project.get("version")


def get_version() -> str:
    """Return the installed version, or the one in a source checkout."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return _source_tree_version() or "0.0.0"


__version__ = get_version()
