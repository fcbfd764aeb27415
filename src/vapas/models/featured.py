import reflex as rx
from sqlmodel import Field


class FeaturedBanner(rx.Model, table=True):
    """A promotional banner shown on Sileo's featured page."""

    __tablename__ = "vapas_featured"

    url: str
    title: str
    # package_id of the featured package, not a foreign key
    package: str
    hide_shadow: bool = Field(default=False)
