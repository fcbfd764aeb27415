"""Resolution of the static icon files served next to the index."""

import logging
from pathlib import Path

from .constants import CYDIA_ICON, FOOTER_ICON, ICONS_SUBDIR
from .exceptions import AssetNotFound

logger = logging.getLogger(__name__)

FIXED_ASSETS = frozenset({CYDIA_ICON, FOOTER_ICON})


def _existing(path: Path) -> Path:
    if not path.is_file():
        logger.warning(f"Requested asset does not exist: {path}")
        raise AssetNotFound(path)
    return path


def resolve_asset(assets_dir: Path, name: str) -> Path:
    """Path of one of the fixed top-level assets (``CydiaIcon.png``, ``footerIcon.png``)."""
    if name not in FIXED_ASSETS:
        raise AssetNotFound(assets_dir / name)
    return _existing(assets_dir / name)


def resolve_icon(assets_dir: Path, name: str) -> Path:
    """Path of ``icons/{name}.png``.

    ``name`` must already be restricted to safe filename characters by the router.
    """
    return _existing(assets_dir / ICONS_SUBDIR / f"{name}.png")
