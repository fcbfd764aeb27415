"""initial schema

Revision ID: 3f1c2a9b7d40
Revises:
Create Date: 2026-10-19 12:00:00.000000+00:00

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel.sql.sqltypes
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "vapas_release",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("origin", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("label", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("suite", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("version", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("codename", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("architectures", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("components", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_vapas_release")),
    )
    op.create_table(
        "package_information",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("package_id", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("version", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("section", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("developer_name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("depends", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=True),
        sa.Column("version_size", sa.BigInteger(), nullable=False),
        sa.Column("version_hash", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("short_description", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("icon", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("package_visible", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_package_information")),
    )
    op.create_index(
        op.f("ix_package_information_package_id"), "package_information", ["package_id"], unique=True
    )
    op.create_index(
        op.f("ix_package_information_package_visible"),
        "package_information",
        ["package_visible"],
        unique=False,
    )
    op.create_table(
        "vapas_featured",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("url", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("package", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("hide_shadow", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_vapas_featured")),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("vapas_featured")
    op.drop_index(op.f("ix_package_information_package_visible"), table_name="package_information")
    op.drop_index(op.f("ix_package_information_package_id"), table_name="package_information")
    op.drop_table("package_information")
    op.drop_table("vapas_release")
