"""Initial migration - create the students table

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Creates the students table for the Student Assessment Tracker. Derived
metrics (total, average, percentage, performance level) are computed on
read and have no columns.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── Students Table ────────────────────────────────────────
    op.create_table(
        'students',
        sa.Column('student_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(50), nullable=False),
        sa.Column('last_name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('grade', sa.String(10), nullable=False),
        sa.Column('enrollment_date', sa.Date(), nullable=False,
                  server_default=sa.func.current_date()),
        sa.Column('assessment1', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('assessment2', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('assessment3', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_date', sa.DateTime(), nullable=False,
                  server_default=sa.func.now()),
        sa.CheckConstraint('assessment1 BETWEEN 0 AND 20', name='ck_students_assessment1_range'),
        sa.CheckConstraint('assessment2 BETWEEN 0 AND 20', name='ck_students_assessment2_range'),
        sa.CheckConstraint('assessment3 BETWEEN 0 AND 20', name='ck_students_assessment3_range'),
    )

    # Sorting by name is one of the list view options
    op.create_index('ix_students_last_name', 'students', ['last_name'])
    op.create_index('ix_students_first_name', 'students', ['first_name'])


def downgrade() -> None:
    op.drop_index('ix_students_first_name', table_name='students')
    op.drop_index('ix_students_last_name', table_name='students')
    op.drop_table('students')
