"""Create users, professors, academics, classes and class_academics

Revision ID: 3b1f0c2a9d10
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3b1f0c2a9d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('plaintext_password', sa.String(length=255), nullable=False),
        sa.Column('user_type', sa.Enum('professor', 'academic', name='user_type', native_enum=False), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'professors',
        sa.Column('id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('department', sa.String(length=255), nullable=False),
    )

    op.create_table(
        'academics',
        sa.Column('id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('registration_number', sa.String(length=50), nullable=False),
    )

    op.create_table(
        'classes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('professor_id', sa.Integer(), sa.ForeignKey('professors.id', ondelete='RESTRICT'), nullable=False),
    )
    op.create_index('ix_classes_name', 'classes', ['name'])

    op.create_table(
        'class_academics',
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('academic_id', sa.Integer(), sa.ForeignKey('academics.id', ondelete='CASCADE'), primary_key=True),
        sa.UniqueConstraint('class_id', 'academic_id', name='uq_class_academic_enrollment'),
    )


def downgrade() -> None:
    op.drop_table('class_academics')
    op.drop_index('ix_classes_name', table_name='classes')
    op.drop_table('classes')
    op.drop_table('academics')
    op.drop_table('professors')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
