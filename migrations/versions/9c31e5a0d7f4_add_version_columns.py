"""add_version_columns

Revision ID: 9c31e5a0d7f4
Revises: 4b7d2e91c0a3
Create Date: 2025-11-24 16:03:11.902417

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9c31e5a0d7f4'
down_revision: Union[str, Sequence[str], None] = '4b7d2e91c0a3'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add optimistic-lock version counters to employees and groups."""
    op.add_column('employees', sa.Column('version', sa.Integer(), nullable=False, server_default='1'))
    op.add_column('groups', sa.Column('version', sa.Integer(), nullable=False, server_default='1'))


def downgrade() -> None:
    """Drop the version counters."""
    op.drop_column('groups', 'version')
    op.drop_column('employees', 'version')
