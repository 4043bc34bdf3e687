"""Version string shown by ``merge-images --version``."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from merge_images.logging_utils import logger

DISTRIBUTION = "merge-images"
UNKNOWN_VERSION = "0.0.0"

# src/merge_images/version.py -> checkout root
_CHECKOUT_ROOT = Path(__file__).resolve().parents[2]


def _checkout_version(root: Path) -> str | None:
    """Return project.version when ``root`` holds this project's pyproject."""
    pyproject = root / "pyproject.toml"
    if not pyproject.is_file():
        return None
    try:
        with pyproject.open(encoding="utf-8") as f:
            project = tomlkit.load(f).unwrap().get("project", {})
    except (OSError, TOMLKitError) as exc:
        logger.warning("Cannot read %s: %s", pyproject, exc)
        return None
    if project.get("name") != DISTRIBUTION:
        return None
    version = project.get("version")
    return version.strip() if isinstance(version, str) and version else None


def resolve_project_version(root: Path = _CHECKOUT_ROOT) -> str:
    """
    Return the installed merge-images version.

    When the package runs from a source checkout (``run_merge.py``), the
    version comes from the checkout's pyproject.toml instead.
    """
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        logger.debug("%s is not installed, checking %s", DISTRIBUTION, root)
    return _checkout_version(root) or UNKNOWN_VERSION
