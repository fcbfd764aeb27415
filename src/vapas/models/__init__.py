"""Expose ORM models."""

from .featured import FeaturedBanner
from .package import PackageInfo
from .release import ReleaseInfo

__all__ = [
    "FeaturedBanner",
    "PackageInfo",
    "ReleaseInfo",
]
