import pytest

from vapas.assets import resolve_asset, resolve_icon
from vapas.exceptions import AssetNotFound


def test_resolve_fixed_assets(assets_dir):
    assert resolve_asset(assets_dir, "CydiaIcon.png") == assets_dir / "CydiaIcon.png"
    assert resolve_asset(assets_dir, "footerIcon.png") == assets_dir / "footerIcon.png"


def test_unknown_fixed_asset(assets_dir):
    (assets_dir / "other.png").write_bytes(b"x")
    with pytest.raises(AssetNotFound):
        resolve_asset(assets_dir, "other.png")


def test_resolve_icon(assets_dir):
    assert resolve_icon(assets_dir, "Tweaks") == assets_dir / "icons" / "Tweaks.png"


def test_missing_icon(assets_dir):
    with pytest.raises(AssetNotFound) as excinfo:
        resolve_icon(assets_dir, "Themes")
    assert excinfo.value.path == assets_dir / "icons" / "Themes.png"


def test_directory_is_not_an_asset(assets_dir):
    (assets_dir / "icons" / "dir.png").mkdir()
    with pytest.raises(AssetNotFound):
        resolve_icon(assets_dir, "dir")
