"""unbounded_tag_slug

Revision ID: c7d3e1f0a942
Revises: 9b4e6d2c5a81
Create Date: 2026-10-19 14:02:11.540276

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "c7d3e1f0a942"
down_revision: Union[str, Sequence[str], None] = "9b4e6d2c5a81"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Store tag slugs as text.

    Slugs come from the name before trimming, so surrounding whitespace can
    make them longer than any fixed limit even when the name fits.
    """
    op.alter_column(
        "tags",
        "slug",
        existing_type=sa.String(255),
        type_=sa.Text(),
        existing_nullable=False,
    )


def downgrade() -> None:
    """Restore the 255 character slug limit."""
    op.alter_column(
        "tags",
        "slug",
        existing_type=sa.Text(),
        type_=sa.String(255),
        existing_nullable=False,
    )
