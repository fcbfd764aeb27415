"""Sileo ``sileo-featured.json`` envelope."""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from .constants import FEATURED_CLASS, FEATURED_ITEM_CORNER_RADIUS, FEATURED_ITEM_SIZE
from .models import FeaturedBanner


class SileoFeaturedBanner(BaseModel):
    """One banner entry as Sileo expects it."""

    url: str
    title: str
    package: str
    hide_shadow: bool = Field(serialization_alias="hideShadow")


class SileoFeatured(BaseModel):
    """The featured view: fixed layout values plus the banner list."""

    class_: str = Field(default=FEATURED_CLASS, serialization_alias="class")
    item_size: str = Field(default=FEATURED_ITEM_SIZE, serialization_alias="itemSize")
    item_corner_radius: int = Field(default=FEATURED_ITEM_CORNER_RADIUS, serialization_alias="itemCornerRadius")
    banners: list[SileoFeaturedBanner] = Field(default_factory=list)


def serialize_featured(banners: Iterable[FeaturedBanner]) -> dict[str, Any]:
    """Build the featured envelope, keeping banners in the order given."""
    featured = SileoFeatured(
        banners=[
            SileoFeaturedBanner(
                url=banner.url,
                title=banner.title,
                package=banner.package,
                hide_shadow=bool(banner.hide_shadow),
            )
            for banner in banners
        ]
    )
    return featured.model_dump(by_alias=True)
