"""create auth, profile and workout tracking tables

Revision ID: 5b1e0c7d2a94
Revises:
Create Date: 2026-10-18 20:15:02.311870

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# define the enum type once so we can create/drop it explicitly
partner_status = postgresql.ENUM('pending', 'accepted', name='partner_status', create_type=False)


# revision identifiers, used by Alembic.
revision: str = '5b1e0c7d2a94'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    partner_status.create(op.get_bind(), checkfirst=True)

    # 1) auth identities + revoked tokens
    op.create_table(
        'auth_identities',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_auth_identities_id', 'auth_identities', ['id'])
    op.create_index('ix_auth_identities_email', 'auth_identities', ['email'], unique=True)

    op.create_table(
        'revoked_tokens',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('jti', sa.String(length=64), nullable=False),
        sa.Column('revoked_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_revoked_tokens_jti', 'revoked_tokens', ['jti'], unique=True)

    # 2) user profiles
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('auth_id', sa.Integer(), sa.ForeignKey('auth_identities.id', ondelete='CASCADE'), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('username', sa.String(length=60), nullable=False, unique=True),
        sa.Column('height', sa.Numeric(5, 1), nullable=True),
        sa.Column('weight', sa.Numeric(5, 1), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_auth_id', 'users', ['auth_id'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'])

    # 3) partners
    op.create_table(
        'workout_partners',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('partner_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('status', partner_status, nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 4) workouts -> exercises -> sets
    op.create_table(
        'daily_workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('workout_type', sa.String(length=60), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('difficulty', sa.String(length=20), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_shared', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('shared_with', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('daily_workout_id', sa.Integer(), sa.ForeignKey('daily_workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('target_sets', sa.Integer(), nullable=False),
        sa.Column('target_reps', sa.String(length=20), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
    )

    op.create_table(
        'exercise_sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('reps', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint('exercise_id', 'user_id', 'set_number', name='uq_exercise_sets_user_number'),
    )

    # 5) catalog
    op.create_table(
        'available_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('main_muscle_group', sa.String(length=60), nullable=False, index=True),
        sa.Column('primary_equipment', sa.String(length=60), nullable=True),
        sa.Column('grip_style', sa.String(length=60), nullable=True),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('available_exercises')
    op.drop_table('exercise_sets')
    op.drop_table('workout_exercises')
    op.drop_table('daily_workouts')
    op.drop_table('workout_partners')
    op.drop_table('users')
    op.drop_table('revoked_tokens')
    op.drop_table('auth_identities')

    # finally drop enum type
    partner_status.drop(op.get_bind(), checkfirst=True)
