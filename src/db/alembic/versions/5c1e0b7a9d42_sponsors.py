"""sponsors

Revision ID: 5c1e0b7a9d42
Revises:
Create Date: 2026-10-17 18:52:11.409317

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e0b7a9d42"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

coop_duration_enum = sa.Enum("QUARTER_YEAR", "FULL_YEAR", name = "coopduration")
sponsor_class_enum = sa.Enum("PLATINUM", "GOLD", "SILVER", name = "sponsorclass")


def upgrade() -> None:
    op.create_table(
        "sponsors",
        sa.Column("name", sa.String(), nullable = False),
        sa.Column("coop_duration", coop_duration_enum, nullable = False),
        sa.Column("image_url", sa.String(), nullable = False),
        sa.Column("website_url", sa.String(), nullable = False),
        sa.Column("sponsor_class", sponsor_class_enum, nullable = False),
        sa.Column("created_at", sa.DateTime(), server_default = sa.func.now(), nullable = False),
        sa.Column("updated_at", sa.DateTime(), server_default = sa.func.now(), nullable = False),
        sa.PrimaryKeyConstraint("name", name = "pk_sponsors"),
    )
    op.create_index("ix_sponsors_coop_duration", "sponsors", ["coop_duration"])
    op.create_index("ix_sponsors_sponsor_class", "sponsors", ["sponsor_class"])


def downgrade() -> None:
    op.drop_index("ix_sponsors_sponsor_class", table_name = "sponsors")
    op.drop_index("ix_sponsors_coop_duration", table_name = "sponsors")
    op.drop_table("sponsors")
    sponsor_class_enum.drop(op.get_bind(), checkfirst = True)
    coop_duration_enum.drop(op.get_bind(), checkfirst = True)
