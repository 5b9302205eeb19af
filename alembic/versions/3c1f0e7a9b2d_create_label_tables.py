"""create orgs, threads and label tables

Revision ID: 3c1f0e7a9b2d
Revises:
Create Date: 2026-10-19 10:02:11.481203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0e7a9b2d'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('hashed_password', sa.String(), nullable=True),
        sa.Column('is_site_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'orgs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('display_name', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_orgs_id', 'orgs', ['id'])

    op.create_table(
        'org_members',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('org_id', sa.Integer(), sa.ForeignKey('orgs.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('org_id', 'user_id', name='uq_org_members_org_user'),
    )
    op.create_index('ix_org_members_id', 'org_members', ['id'])

    op.create_table(
        'discussion_threads',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('author_user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_discussion_threads_id', 'discussion_threads', ['id'])

    op.create_table(
        'labels',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('color', sa.String(), nullable=False),
        sa.Column('org_id', sa.Integer(), sa.ForeignKey('orgs.id'), nullable=False),
    )
    op.create_index('ix_labels_id', 'labels', ['id'])
    op.create_index('ix_labels_org_id', 'labels', ['org_id'])

    op.create_table(
        'discussion_thread_labels',
        sa.Column('thread_id', sa.Integer(), sa.ForeignKey('discussion_threads.id'), primary_key=True),
        sa.Column('label_id', sa.Integer(), sa.ForeignKey('labels.id'), primary_key=True),
    )

def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('discussion_thread_labels')
    op.drop_index('ix_labels_org_id', table_name='labels')
    op.drop_index('ix_labels_id', table_name='labels')
    op.drop_table('labels')
    op.drop_index('ix_discussion_threads_id', table_name='discussion_threads')
    op.drop_table('discussion_threads')
    op.drop_index('ix_org_members_id', table_name='org_members')
    op.drop_table('org_members')
    op.drop_index('ix_orgs_id', table_name='orgs')
    op.drop_table('orgs')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
