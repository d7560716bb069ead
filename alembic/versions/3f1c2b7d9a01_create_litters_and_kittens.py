"""Create litters and kittens tables

Revision ID: 3f1c2b7d9a01
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2b7d9a01'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create litters and kittens tables."""

    # --- litters ---
    op.create_table(
        'litters',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('status', sa.String(length=16), server_default='planned', nullable=False),
        sa.Column('mother_id', sa.Uuid(), nullable=True),
        sa.Column('father_id', sa.Uuid(), nullable=True),
        sa.Column('external_father_name', sa.String(length=255), nullable=True),
        sa.Column('external_father_pedigree_url', sa.Text(), nullable=True),
        sa.Column('mating_date', sa.Date(), nullable=True),
        sa.Column('mating_date_from', sa.Date(), nullable=True),
        sa.Column('mating_date_to', sa.Date(), nullable=True),
        sa.Column('expected_date', sa.Date(), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('completion_date', sa.Date(), nullable=True),
        sa.Column('reasoning', sa.Text(), nullable=True),
        sa.Column('inbreeding_coefficient', sa.Float(), nullable=True),
        sa.Column('blood_type_notes', sa.Text(), nullable=True),
        sa.Column('alternative_combinations', sa.Text(), nullable=True),
        sa.Column('mating_notes', sa.Text(), nullable=True),
        sa.Column('pregnancy_notes', sa.Text(), nullable=True),
        sa.Column('pregnancy_notes_log', sa.JSON(), nullable=False),
        sa.Column('mother_weight_log', sa.JSON(), nullable=False),
        sa.Column('kitten_count', sa.Integer(), nullable=True),
        sa.Column('birth_notes', sa.Text(), nullable=True),
        sa.Column('nrr_registered', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('evaluation', sa.Text(), nullable=True),
        sa.Column('buyers_info', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_litters_status_created', 'litters', ['status', 'created_at'],
        unique=False,
    )

    # --- kittens ---
    op.create_table(
        'kittens',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('litter_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('gender', sa.String(length=16), nullable=True),
        sa.Column('color', sa.String(length=128), nullable=True),
        sa.Column('ems_code', sa.String(length=64), nullable=True),
        sa.Column('status', sa.String(length=16), server_default='available', nullable=False),
        sa.Column('reserved_by', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('birth_weight', sa.Float(), nullable=True),
        sa.Column('complication_type', sa.String(length=16), nullable=True),
        sa.Column('weight_log', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['litter_id'], ['litters.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_kittens_litter_created', 'kittens', ['litter_id', 'created_at'],
        unique=False,
    )


def downgrade() -> None:
    """Drop kittens and litters tables."""
    op.drop_index('ix_kittens_litter_created', table_name='kittens')
    op.drop_table('kittens')
    op.drop_index('ix_litters_status_created', table_name='litters')
    op.drop_table('litters')
