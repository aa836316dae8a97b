"""Create users and youtube_summaries tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

Summaries are owned by a user and removed with them.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import fastapi_users_db_sqlalchemy


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and youtube_summaries tables."""
    op.create_table(
        'users',
        sa.Column('id', fastapi_users_db_sqlalchemy.generics.GUID(), primary_key=True),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('hashed_password', sa.String(length=1024), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_superuser', sa.Boolean(), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'youtube_summaries',
        sa.Column('id', fastapi_users_db_sqlalchemy.generics.GUID(), primary_key=True),
        sa.Column(
            'user_id',
            fastapi_users_db_sqlalchemy.generics.GUID(),
            sa.ForeignKey('users.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('video_id', sa.String(32), nullable=False),
        sa.Column('video_title', sa.String(), nullable=False),
        sa.Column('video_url', sa.String(), nullable=False),
        sa.Column('video_thumbnail', sa.String(), nullable=True),
        sa.Column('transcript', sa.Text(), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )

    op.create_index('ix_youtube_summaries_user_id', 'youtube_summaries', ['user_id'])
    op.create_index('ix_youtube_summaries_video_id', 'youtube_summaries', ['video_id'])
    op.create_index('ix_youtube_summaries_created_at', 'youtube_summaries', ['created_at'])


def downgrade() -> None:
    """Drop youtube_summaries and users tables."""
    op.drop_index('ix_youtube_summaries_created_at', table_name='youtube_summaries')
    op.drop_index('ix_youtube_summaries_video_id', table_name='youtube_summaries')
    op.drop_index('ix_youtube_summaries_user_id', table_name='youtube_summaries')
    op.drop_table('youtube_summaries')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
