"""Initial schema - Milk Collection

Revision ID: 0000_initial
Revises:
Create Date: 2026-10-17

Tables:
- register (users: farmers and admins)
- collection_center
- created_collection (deliveries, cascade on user/center delete)
- payments (cascade on user delete)
"""

from alembic import op
import sqlalchemy as sa

revision = '0000_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'register',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('fullname', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), server_default='user', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )
    op.create_index('ix_register_created_at', 'register', ['created_at'])

    op.create_table(
        'collection_center',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('code', sa.String(50), nullable=False),
        sa.Column('manager', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('location', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code'),
    )
    op.create_index('ix_collection_center_created_at', 'collection_center', ['created_at'])

    op.create_table(
        'created_collection',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('collection_center_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('quantity', sa.Numeric(12, 2), nullable=False),
        sa.Column('quality', sa.String(50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['collection_center_id'], ['collection_center.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['register.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_created_collection_collection_center_id', 'created_collection', ['collection_center_id'])
    op.create_index('ix_created_collection_user_id', 'created_collection', ['user_id'])
    op.create_index('ix_created_collection_created_at', 'created_collection', ['created_at'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farmer_id', sa.Uuid(), nullable=False),
        sa.Column('quantity', sa.Numeric(12, 2), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('payment_method', sa.String(50), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['farmer_id'], ['register.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_payments_farmer_id', 'payments', ['farmer_id'])
    op.create_index('ix_payments_created_at', 'payments', ['created_at'])


def downgrade():
    op.drop_table('payments')
    op.drop_table('created_collection')
    op.drop_table('collection_center')
    op.drop_table('register')
