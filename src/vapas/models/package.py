"""Package rows listed in the ``Packages`` index."""

import reflex as rx
from sqlmodel import BigInteger, Field


class PackageInfo(rx.Model, table=True):
    """Stored metadata for the current version of a single package."""

    __tablename__ = "package_information"

    package_id: str = Field(index=True, unique=True)
    name: str
    version: str
    section: str
    developer_name: str
    depends: str = ""
    price: int | None = Field(default=0)
    version_size: int = Field(sa_type=BigInteger)
    version_hash: str
    short_description: str
    icon: str
    package_visible: bool = Field(default=False, index=True)

    @property
    def is_commercial(self) -> bool:
        """Whether the package has a non-zero price."""
        return (self.price or 0) > 0
