"""Typed read access to the package store."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from .exceptions import StorageError
from .models import FeaturedBanner, PackageInfo, ReleaseInfo

logger = logging.getLogger(__name__)


class StorageGateway:
    """Fetches release, package and featured-banner rows.

    Each call checks a connection out of the engine's pool for the duration of
    one query and returns detached rows in ascending ``id`` order.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def _session(self, what: str) -> Iterator[Session]:
        try:
            with Session(self.engine, expire_on_commit=False) as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Error loading {what}: {e}")
            raise StorageError(f"Error loading {what}") from e

    def fetch_releases(self) -> list[ReleaseInfo]:
        """All release rows, unfiltered."""
        with self._session("release information") as session:
            rows = list(session.exec(select(ReleaseInfo).order_by(ReleaseInfo.id)).all())
        logger.debug(f"Loaded {len(rows)} release rows")
        return rows

    def fetch_visible_packages(self) -> list[PackageInfo]:
        """Package rows with ``package_visible`` set."""
        query = (
            select(PackageInfo)
            .where(PackageInfo.package_visible == True)  # noqa: E712
            .order_by(PackageInfo.id)
        )
        with self._session("package information") as session:
            rows = list(session.exec(query).all())
        logger.debug(f"Loaded {len(rows)} visible packages")
        return rows

    def fetch_featured_banners(self) -> list[FeaturedBanner]:
        """All featured banner rows, unfiltered."""
        with self._session("featured information") as session:
            rows = list(session.exec(select(FeaturedBanner).order_by(FeaturedBanner.id)).all())
        logger.debug(f"Loaded {len(rows)} featured banners")
        return rows
