"""create users and record tables

Revision ID: 4e2b9d1a7c30
Revises:
Create Date: 2025-10-06 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4e2b9d1a7c30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=255), nullable=True),
        sa.Column('admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_online_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'helprequests',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('requester_email', sa.String(length=255), nullable=True),
        sa.Column('team_id', sa.String(length=255), nullable=True),
        sa.Column('table_or_breakout_room', sa.String(length=255), nullable=True),
        sa.Column('request_time', sa.DateTime(), nullable=True),
        sa.Column('explanation', sa.String(length=255), nullable=True),
        sa.Column('solved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'recommendationrequests',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('requester_email', sa.String(length=255), nullable=True),
        sa.Column('professor_email', sa.String(length=255), nullable=True),
        sa.Column('explanation', sa.String(length=255), nullable=True),
        sa.Column('date_requested', sa.DateTime(), nullable=True),
        sa.Column('date_needed', sa.DateTime(), nullable=True),
        sa.Column('done', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'menuitemreview',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('item_id', sa.BigInteger(), nullable=False),
        sa.Column('reviewer_email', sa.String(length=255), nullable=True),
        sa.Column('stars', sa.Integer(), nullable=False),
        sa.Column('date_reviewed', sa.DateTime(), nullable=True),
        sa.Column('comments', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'articles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('url', sa.String(length=500), nullable=False),
        sa.Column('explanation', sa.Text(), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('date_added', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'ucsbdiningcommonsmenuitem',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('dining_commons_code', sa.String(length=255), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('station', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_ucsbdiningcommonsmenuitem_code', 'ucsbdiningcommonsmenuitem', ['dining_commons_code'], unique=False)

    op.create_table(
        'ucsborganization',
        sa.Column('org_code', sa.String(length=50), nullable=False),
        sa.Column('org_translation_short', sa.String(length=255), nullable=True),
        sa.Column('org_translation', sa.String(length=255), nullable=True),
        sa.Column('inactive', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('org_code'),
    )


def downgrade() -> None:
    op.drop_table('ucsborganization')
    op.drop_index('idx_ucsbdiningcommonsmenuitem_code', table_name='ucsbdiningcommonsmenuitem')
    op.drop_table('ucsbdiningcommonsmenuitem')
    op.drop_table('articles')
    op.drop_table('menuitemreview')
    op.drop_table('recommendationrequests')
    op.drop_table('helprequests')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
