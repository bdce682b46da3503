"""create_songs_and_skipped_sections

Revision ID: 4c1e8a7d2b90
Revises:
Create Date: 2026-10-19 09:12:31.408213

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4c1e8a7d2b90"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the songs and skipped_sections tables."""
    op.create_table(
        "songs",
        sa.Column("song_id", sa.String(255), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("artist", sa.String(255), nullable=False),
    )
    op.create_table(
        "skipped_sections",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "song_id", sa.String(255), sa.ForeignKey("songs.song_id"), nullable=False
        ),
        sa.Column("start_time", sa.Integer(), nullable=False),
        sa.Column("end_time", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("start_time >= 0", name="ck_skipped_sections_start_time"),
        sa.CheckConstraint(
            "end_time >= start_time", name="ck_skipped_sections_time_range"
        ),
    )
    op.create_index(
        "ix_skipped_sections_song_id", "skipped_sections", ["song_id"]
    )


def downgrade() -> None:
    """Drop the songs and skipped_sections tables."""
    op.drop_index("ix_skipped_sections_song_id", table_name="skipped_sections")
    op.drop_table("skipped_sections")
    op.drop_table("songs")
