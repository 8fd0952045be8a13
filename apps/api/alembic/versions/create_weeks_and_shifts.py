"""create weeks and shifts tables

Revision ID: create_weeks_shifts
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'create_weeks_shifts'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'weeks',
        sa.Column('week_id', sa.Uuid(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('published_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('week_id'),
    )
    # one row per calendar week
    op.create_index(op.f('ix_weeks_start_date'), 'weeks', ['start_date'], unique=True)

    op.create_table(
        'shifts',
        sa.Column('shift_id', sa.Uuid(), nullable=False),
        sa.Column('week_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['week_id'], ['weeks.week_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('shift_id'),
    )
    op.create_index(op.f('ix_shifts_week_id'), 'shifts', ['week_id'], unique=False)
    op.create_index('ix_shifts_date_start_time', 'shifts', ['date', 'start_time'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_shifts_date_start_time', table_name='shifts')
    op.drop_index(op.f('ix_shifts_week_id'), table_name='shifts')
    op.drop_table('shifts')
    op.drop_index(op.f('ix_weeks_start_date'), table_name='weeks')
    op.drop_table('weeks')
