"""create users, clothing pieces, outfits, outfit pieces and wear log tables

Revision ID: create_wardrobe_tables_20261019
Revises:
Create Date: 2026-10-19 00:00:00
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_wardrobe_tables_20261019'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(255), primary_key=True),
        sa.Column('email', sa.String(255), nullable=True, unique=True),
        sa.Column('first_name', sa.String(255), nullable=True),
        sa.Column('last_name', sa.String(255), nullable=True),
        sa.Column('profile_image_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'])

    op.create_table(
        'clothing_pieces',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('color', sa.String(50), nullable=False),
        sa.Column('season', sa.String(50), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('image_path', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_clothing_pieces_user_id', 'clothing_pieces', ['user_id'])
    op.create_index('ix_clothing_pieces_category', 'clothing_pieces', ['category'])
    op.create_index('ix_clothing_pieces_color', 'clothing_pieces', ['color'])
    op.create_index('ix_clothing_pieces_season', 'clothing_pieces', ['season'])
    op.create_index('ix_clothing_pieces_created_at', 'clothing_pieces', ['created_at'])

    op.create_table(
        'outfits',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('cover_image', sa.String(), nullable=True),
        sa.Column('worn_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_worn', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_outfits_user_id', 'outfits', ['user_id'])
    op.create_index('ix_outfits_created_at', 'outfits', ['created_at'])

    op.create_table(
        'outfit_pieces',
        sa.Column('outfit_id', sa.String(36), sa.ForeignKey('outfits.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('piece_id', sa.String(36), sa.ForeignKey('clothing_pieces.id', ondelete='CASCADE'), primary_key=True),
    )

    op.create_table(
        'wear_log',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('outfit_id', sa.String(36), sa.ForeignKey('outfits.id', ondelete='CASCADE'), nullable=False),
        sa.Column('worn_date', sa.DateTime(), nullable=False),
        sa.Column('location', sa.String(200), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_wear_log_user_id', 'wear_log', ['user_id'])
    op.create_index('ix_wear_log_outfit_id', 'wear_log', ['outfit_id'])
    op.create_index('ix_wear_log_worn_date', 'wear_log', ['worn_date'])


def downgrade() -> None:
    op.drop_table('wear_log')
    op.drop_table('outfit_pieces')
    op.drop_table('outfits')
    op.drop_table('clothing_pieces')
    op.drop_table('users')
