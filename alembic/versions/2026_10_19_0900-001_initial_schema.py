"""Initial schema: users, profiles, log entries, plans

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_premium', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('subscription_status', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False,
                  server_default='free'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('user_profiles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('is_current', sa.Boolean(), nullable=False),
        sa.Column('profile_data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('superseded_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'version', name='uq_user_profile_version'))
    op.create_index(op.f('ix_user_profiles_user_id'), 'user_profiles', ['user_id'])
    op.create_index(op.f('ix_user_profiles_is_current'), 'user_profiles', ['is_current'])

    op.create_table('daily_log_entries', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('metric', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('timestamp_ms', sa.BigInteger(), nullable=False),
        sa.Column('value', sa.Float(), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=True),
        sa.Column('habit_id', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('quality_percent', sa.Float(), nullable=True),
        sa.Column('note', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_daily_log_entries_user_id'), 'daily_log_entries', ['user_id'])
    op.create_index('ix_log_user_metric_date', 'daily_log_entries', ['user_id', 'metric', 'date'])

    op.create_table('generated_plans', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('kind', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('profile_version', sa.Integer(), nullable=False),
        sa.Column('catalog_version', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('seed', sa.Integer(), nullable=True),
        sa.Column('payload', sa.JSON(), nullable=False),
        sa.Column('warnings', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('deactivated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_generated_plans_user_id'), 'generated_plans', ['user_id'])
    op.create_index(op.f('ix_generated_plans_kind'), 'generated_plans', ['kind'])
    op.create_index(op.f('ix_generated_plans_is_active'), 'generated_plans', ['is_active'])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f('ix_generated_plans_is_active'), table_name='generated_plans')
    op.drop_index(op.f('ix_generated_plans_kind'), table_name='generated_plans')
    op.drop_index(op.f('ix_generated_plans_user_id'), table_name='generated_plans')
    op.drop_table('generated_plans')
    op.drop_index('ix_log_user_metric_date', table_name='daily_log_entries')
    op.drop_index(op.f('ix_daily_log_entries_user_id'), table_name='daily_log_entries')
    op.drop_table('daily_log_entries')
    op.drop_index(op.f('ix_user_profiles_is_current'), table_name='user_profiles')
    op.drop_index(op.f('ix_user_profiles_user_id'), table_name='user_profiles')
    op.drop_table('user_profiles')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
