"""initial schema : clients + assessments Checkup

Revision ID: 001_initial
Create Date: 18/10/2026
"""
from alembic import op
import sqlalchemy as sa

revision = '001_initial'
down_revision = None

BURDENS = (
    "stress", "exhaustion", "anxiety", "depression", "self_doubt",
    "sleep_problems", "tension", "irritability", "social_withdrawal", "other",
)
SELF_CARE = (
    "adequate_sleep", "healthy_eating", "sufficient_rest", "exercise",
    "set_boundaries", "time_for_beauty", "share_emotions", "live_values",
)


def upgrade() -> None:
    op.create_table("clients",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("client_id", sa.String, nullable=False),
        sa.Column("client_name", sa.String, nullable=False),
        sa.Column("coach_name", sa.String, nullable=False),
        sa.Column("status", sa.String, nullable=False),
        sa.Column("registration_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("weeks", sa.Float, nullable=False, server_default="0"),
        sa.Column("chat_link", sa.String, nullable=False, server_default=""),
        sa.Column("wellbeing_t0_basic", sa.Integer, nullable=True),
        sa.Column("wellbeing_t4_basic", sa.Integer, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_clients_id", "clients", ["id"])
    op.create_index("ix_clients_client_id", "clients", ["client_id"], unique=True)
    op.create_index("ix_clients_coach_name", "clients", ["coach_name"])

    # Pas de FK vers clients : les assessments orphelins sont tolérés
    op.create_table("assessments",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("client_id", sa.String, nullable=False),
        sa.Column("timepoint", sa.String, nullable=False),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("wellbeing", sa.Integer, nullable=True),
        *[sa.Column(name, sa.String, nullable=True) for name in BURDENS],
        sa.Column("work_area", sa.Integer, nullable=True),
        sa.Column("private_area", sa.Integer, nullable=True),
        *[sa.Column(name, sa.String, nullable=True) for name in SELF_CARE],
        sa.Column("trust", sa.String, nullable=True),
        sa.Column("genuine_interest", sa.String, nullable=True),
        sa.Column("mutual_understanding", sa.String, nullable=True),
        sa.Column("goal_alignment", sa.String, nullable=True),
        sa.Column("learning_experience", sa.Integer, nullable=True),
        sa.Column("progress_achievement", sa.Integer, nullable=True),
        sa.Column("general_satisfaction", sa.Integer, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("client_id", "timepoint", name="uq_assessments_client_timepoint"),
    )
    op.create_index("ix_assessments_id", "assessments", ["id"])
    op.create_index("ix_assessments_client_id", "assessments", ["client_id"])


def downgrade() -> None:
    op.drop_table("assessments")
    op.drop_table("clients")
