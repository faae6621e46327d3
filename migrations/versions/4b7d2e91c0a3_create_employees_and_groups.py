"""create_employees_and_groups

Revision ID: 4b7d2e91c0a3
Revises:
Create Date: 2025-11-10 09:12:44.518302

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7d2e91c0a3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create employees, groups and the group_employees membership table."""
    op.create_table('employees',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('full_name', sa.String(length=200), nullable=False),
        sa.Column('document_type', sa.String(length=50), nullable=False),
        sa.Column('document_number', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('email_key', sa.String(length=255), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='ACTIVE'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("status IN ('ACTIVE', 'INACTIVE')", name='ck_employees_status'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email_key', name='uq_employees_email_key'),
    )

    op.create_table('groups',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('name_key', sa.String(length=100), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name_key', name='uq_groups_name_key'),
    )

    op.create_table('group_employees',
        sa.Column('group_id', sa.UUID(), nullable=False),
        sa.Column('employee_id', sa.UUID(), nullable=False),
        sa.Column('assigned_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['group_id'], ['groups.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('group_id', 'employee_id'),
    )
    op.create_index('ix_group_employees_employee_id', 'group_employees', ['employee_id'], unique=False)


def downgrade() -> None:
    """Drop membership, group and employee tables."""
    op.drop_index('ix_group_employees_employee_id', table_name='group_employees')
    op.drop_table('group_employees')
    op.drop_table('groups')
    op.drop_table('employees')
