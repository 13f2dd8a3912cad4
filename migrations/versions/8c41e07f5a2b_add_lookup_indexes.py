"""Add lookup indexes

Revision ID: 8c41e07f5a2b
Revises: 3a6f1c2d9b10
Create Date: 2026-10-14 16:40:51.207913

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8c41e07f5a2b'
down_revision: Union[str, None] = '3a6f1c2d9b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # products are filtered by catalogue facets in the admin listing
    op.create_index('idx_products_category', 'products', ['category'])
    op.create_index('idx_products_brand', 'products', ['brand'])
    op.create_index('idx_products_created_at', 'products', ['created_at'])

    op.create_index('idx_orders_customer_email', 'orders', ['customer_email'])
    op.create_index('idx_orders_status', 'orders', ['status'])
    op.create_index('idx_orders_order_date', 'orders', ['order_date'])

    op.create_index('idx_user_roles_role_uid', 'user_roles', ['role_uid'])

    op.create_index('idx_coupons_is_active', 'coupons', ['is_active'])
    op.create_index('idx_coupons_expiration_date', 'coupons', ['expiration_date'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_coupons_expiration_date', table_name='coupons')
    op.drop_index('idx_coupons_is_active', table_name='coupons')
    op.drop_index('idx_user_roles_role_uid', table_name='user_roles')
    op.drop_index('idx_orders_order_date', table_name='orders')
    op.drop_index('idx_orders_status', table_name='orders')
    op.drop_index('idx_orders_customer_email', table_name='orders')
    op.drop_index('idx_products_created_at', table_name='products')
    op.drop_index('idx_products_brand', table_name='products')
    op.drop_index('idx_products_category', table_name='products')
