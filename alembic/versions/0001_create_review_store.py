"""create review store and local account tables

Revision ID: 0001_create_review_store
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_create_review_store'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('professor_name', sa.String(length=200), nullable=False),
        sa.Column('course_name', sa.String(length=200), nullable=False),
        sa.Column('department', sa.String(length=200), nullable=True),
        sa.Column('semester', sa.String(length=50), nullable=False),
        sa.Column('review_text', sa.Text(), nullable=False),
        sa.Column('teaching_rating', sa.Integer(), nullable=False),
        sa.Column('difficulty_rating', sa.Integer(), nullable=False),
        sa.Column('organization_rating', sa.Integer(), nullable=False),
        sa.Column('helpfulness_rating', sa.Integer(), nullable=False),
        sa.Column('overall_rating', sa.Integer(), nullable=False),
        sa.Column('student_name', sa.String(length=100), nullable=True),
        sa.Column('student_email', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.CheckConstraint('teaching_rating >= 0 AND teaching_rating <= 5', name='check_teaching_rating_range'),
        sa.CheckConstraint('difficulty_rating >= 0 AND difficulty_rating <= 5', name='check_difficulty_rating_range'),
        sa.CheckConstraint('organization_rating >= 0 AND organization_rating <= 5', name='check_organization_rating_range'),
        sa.CheckConstraint('helpfulness_rating >= 0 AND helpfulness_rating <= 5', name='check_helpfulness_rating_range'),
        sa.CheckConstraint('overall_rating >= 1 AND overall_rating <= 5', name='check_overall_rating_range'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_reviews_id'), 'reviews', ['id'], unique=False)
    op.create_index(op.f('ix_reviews_professor_name'), 'reviews', ['professor_name'], unique=False)
    op.create_index(op.f('ix_reviews_course_name'), 'reviews', ['course_name'], unique=False)
    op.create_index(op.f('ix_reviews_department'), 'reviews', ['department'], unique=False)
    op.create_index(op.f('ix_reviews_student_email'), 'reviews', ['student_email'], unique=False)
    op.create_index(op.f('ix_reviews_created_at'), 'reviews', ['created_at'], unique=False)

    op.create_table(
        'review_likes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('review_id', sa.Integer(), nullable=False),
        sa.Column('user_email', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.ForeignKeyConstraint(['review_id'], ['reviews.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('review_id', 'user_email', name='uq_review_likes_review_user')
    )
    op.create_index(op.f('ix_review_likes_id'), 'review_likes', ['id'], unique=False)
    op.create_index(op.f('ix_review_likes_review_id'), 'review_likes', ['review_id'], unique=False)

    op.create_table(
        'accounts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('verified_at', sa.TIMESTAMP(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_accounts_id'), 'accounts', ['id'], unique=False)
    op.create_index(op.f('ix_accounts_email'), 'accounts', ['email'], unique=True)

    op.create_table(
        'verification_codes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('code', sa.String(length=6), nullable=False),
        sa.Column('expires_at', sa.TIMESTAMP(), nullable=False),
        sa.Column('consumed', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_verification_codes_id'), 'verification_codes', ['id'], unique=False)
    op.create_index(op.f('ix_verification_codes_email'), 'verification_codes', ['email'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_verification_codes_email'), table_name='verification_codes')
    op.drop_index(op.f('ix_verification_codes_id'), table_name='verification_codes')
    op.drop_table('verification_codes')
    op.drop_index(op.f('ix_accounts_email'), table_name='accounts')
    op.drop_index(op.f('ix_accounts_id'), table_name='accounts')
    op.drop_table('accounts')
    op.drop_index(op.f('ix_review_likes_review_id'), table_name='review_likes')
    op.drop_index(op.f('ix_review_likes_id'), table_name='review_likes')
    op.drop_table('review_likes')
    op.drop_index(op.f('ix_reviews_created_at'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_student_email'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_department'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_course_name'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_professor_name'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_id'), table_name='reviews')
    op.drop_table('reviews')
