"""Database helpers."""

import logging

import sqlalchemy as sa
import wrapt
from sqlalchemy.engine import Engine, make_url
from sqlmodel import create_engine

from .config import Settings
from .models import *  # noqa: F403

logger = logging.getLogger(__name__)

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_`%(constraint_name)s`",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def create_db_engine(settings: Settings) -> Engine:
    """Create the pooled engine every request checks connections out of.

    SQLite keeps SQLAlchemy's own pool choice for the dialect; everything else
    gets a bounded ``QueuePool`` sized by ``settings.pool_size``.
    """
    url = make_url(settings.database_url)
    kwargs: dict = {"pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        kwargs.update(pool_size=settings.pool_size, max_overflow=0)

    engine = create_engine(url, **kwargs)
    logger.debug(f"Database engine created for {url.render_as_string(hide_password=True)}")
    return engine


# monkey-patch Reflex ModelRegistry to include naming conventions in metadata
@wrapt.patch_function_wrapper("reflex.model", "ModelRegistry.get_metadata")
def get_metadata_wrapper(wrapped, instance, args, kwargs):
    """Wrapper to get metadata for Alembic."""
    metadata: sa.MetaData = wrapped(*args, **kwargs)
    metadata.naming_convention = NAMING_CONVENTION
    return metadata
