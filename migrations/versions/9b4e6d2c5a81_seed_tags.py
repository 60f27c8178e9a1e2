"""seed_tags

Revision ID: 9b4e6d2c5a81
Revises: 3f1c2a9d7b10
Create Date: 2026-10-19 10:31:47.208913

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b4e6d2c5a81"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SAMPLE_TAGS = [
    ("Technology", "technology"),
    ("Programming", "programming"),
    ("Design", "design"),
    ("Travel", "travel"),
    ("Food", "food"),
    ("Lifestyle", "lifestyle"),
]


def upgrade() -> None:
    """Seed sample tags."""
    tags_table = sa.table(
        "tags",
        sa.column("name", sa.String),
        sa.column("slug", sa.String),
    )

    op.bulk_insert(
        tags_table,
        [{"name": name, "slug": slug} for name, slug in SAMPLE_TAGS],
    )


def downgrade() -> None:
    """Remove seeded tags that no post uses."""
    op.execute(
        """
        DELETE FROM tags
        WHERE slug IN ('technology', 'programming', 'design', 'travel', 'food', 'lifestyle')
          AND id NOT IN (SELECT tag_id FROM post_tags)
        """
    )
