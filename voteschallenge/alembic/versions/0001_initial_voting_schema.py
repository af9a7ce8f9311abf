"""initial voting schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ruling_outcome = sa.Enum("undecided", "approved", "rejected", name="ruling_outcome")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "rulings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("outcome", ruling_outcome, nullable=False),
        sa.Column("vote_count_date", sa.TIMESTAMP(timezone=True), nullable=True, comment="When the votes were tallied"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_rulings")),
    )
    op.create_index(op.f("ix_rulings_id"), "rulings", ["id"], unique=False)

    op.create_table(
        "associates",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("cpf", sa.String(length=11), nullable=False, comment="CPF stored as 11 digits, no punctuation"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_associates")),
    )
    op.create_index(op.f("ix_associates_id"), "associates", ["id"], unique=False)
    op.create_index(op.f("ix_associates_cpf"), "associates", ["cpf"], unique=True)

    op.create_table(
        "voting_sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("ruling_id", sa.Uuid(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False, comment="Open window in minutes"),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["ruling_id"],
            ["rulings.id"],
            name=op.f("fk_voting_sessions_ruling_id_rulings"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_voting_sessions")),
    )
    op.create_index(op.f("ix_voting_sessions_id"), "voting_sessions", ["id"], unique=False)
    op.create_index(op.f("ix_voting_sessions_ruling_id"), "voting_sessions", ["ruling_id"], unique=False)

    op.create_table(
        "votes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("associate_id", sa.Uuid(), nullable=False),
        sa.Column("session_id", sa.Uuid(), nullable=False),
        sa.Column("vote", sa.Boolean(), nullable=False, comment="True for yes, False for no"),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["associate_id"],
            ["associates.id"],
            name=op.f("fk_votes_associate_id_associates"),
        ),
        sa.ForeignKeyConstraint(
            ["session_id"],
            ["voting_sessions.id"],
            name=op.f("fk_votes_session_id_voting_sessions"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_votes")),
        sa.UniqueConstraint("associate_id", "session_id", name="uq_votes_associate_session"),
    )
    op.create_index(op.f("ix_votes_id"), "votes", ["id"], unique=False)
    op.create_index(op.f("ix_votes_associate_id"), "votes", ["associate_id"], unique=False)
    op.create_index(op.f("ix_votes_session_id"), "votes", ["session_id"], unique=False)


def downgrade() -> None:
    op.drop_table("votes")
    op.drop_table("voting_sessions")
    op.drop_table("associates")
    op.drop_table("rulings")
    ruling_outcome.drop(op.get_bind(), checkfirst=True)
