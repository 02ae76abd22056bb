"""create_site_tables

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 09:12:44.201337

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create affirmations, parties, party_profiles and party_positions."""
    op.create_table(
        "affirmations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("test_type", sa.Integer(), nullable=False),
        sa.Column("axis", sa.String(), nullable=False),
        sa.Column("criterion", sa.String(), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_affirmations_test_type", "affirmations", ["test_type"])
    op.create_index("ix_affirmations_axis", "affirmations", ["axis"])
    op.create_index("ix_affirmations_criterion", "affirmations", ["criterion"])

    op.create_table(
        "parties",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("coordinates", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_parties_name", "parties", ["name"])

    op.create_table(
        "party_profiles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("party_key", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.Column("founded", sa.String(), nullable=True),
        sa.Column("ideology", sa.String(), nullable=True),
        sa.Column("political_position", sa.String(), nullable=True),
        sa.Column("leader", sa.String(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("legal_history", sa.Text(), nullable=True),
        sa.Column("website", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("logo", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_party_profiles_party_key", "party_profiles", ["party_key"], unique=True
    )

    op.create_table(
        "party_positions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("party_key", sa.String(), nullable=False),
        sa.Column("topic", sa.String(), nullable=False),
        sa.Column("stance", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_party_positions_party_key", "party_positions", ["party_key"])
    op.create_index("ix_party_positions_topic", "party_positions", ["topic"])


def downgrade() -> None:
    """Drop all site tables."""
    op.drop_table("party_positions")
    op.drop_table("party_profiles")
    op.drop_table("parties")
    op.drop_table("affirmations")
