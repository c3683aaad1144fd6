"""Initial migration

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), unique=True, nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('role', sa.Enum('owner', 'admin', name='userrole'), default='owner'),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('last_login', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    # Create restaurants table
    op.create_table(
        'restaurants',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('owner_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('plan', sa.String(50), default='Basic'),
        sa.Column('address', sa.Text()),
        sa.Column('phone', sa.String(50)),
        sa.Column('opening_hours', sa.String(50)),
        sa.Column('closing_hours', sa.String(50)),
        sa.Column('description', sa.Text()),
        sa.Column('region', sa.String(100)),
        sa.Column('logo_url', sa.String(500)),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )
    op.create_index('ix_restaurants_owner_id', 'restaurants', ['owner_id'])

    # Create sessions table
    op.create_table(
        'sessions',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('name', sa.String(255)),
        sa.Column('restaurant_id', sa.Uuid()),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )
    op.create_index('ix_sessions_user_id', 'sessions', ['user_id'])
    op.create_index('ix_sessions_expires_at', 'sessions', ['expires_at'])

    # Create menus table
    op.create_table(
        'menus',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('restaurant_id', sa.Uuid(), sa.ForeignKey('restaurants.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('category', sa.String(100)),
        sa.Column('price_cents', sa.Integer(), nullable=False),
        sa.Column('image_url', sa.String(500)),
        sa.Column('video_url', sa.String(500)),
        sa.Column('is_available', sa.Boolean(), default=True),
        sa.Column('dish_tags', sa.JSON(), default=[]),
        sa.Column('popularity', sa.String(20), default='Medium'),
        sa.Column('rating', sa.Float()),
        sa.Column('availability_schedule', sa.String(255)),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )
    op.create_index('ix_menus_restaurant_id', 'menus', ['restaurant_id'])

    # Create orders table
    op.create_table(
        'orders',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('restaurant_id', sa.Uuid(), sa.ForeignKey('restaurants.id'), nullable=False),
        sa.Column('table_number', sa.Integer(), nullable=False),
        sa.Column('customer_name', sa.String(255)),
        sa.Column('customer_contact', sa.String(255)),
        sa.Column('special_requests', sa.Text()),
        sa.Column('kitchen_section', sa.String(100)),
        sa.Column('staff_member', sa.String(255)),
        sa.Column('total_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )
    op.create_index('ix_orders_restaurant_id', 'orders', ['restaurant_id'])
    op.create_index('ix_orders_created_at', 'orders', ['created_at'])

    # Create order_items table
    op.create_table(
        'order_items',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('order_id', sa.Uuid(), sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('menu_id', sa.Uuid(), sa.ForeignKey('menus.id', ondelete='SET NULL')),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, default=1),
        sa.Column('price_cents', sa.Integer(), nullable=False),
        sa.Column('special_requests', sa.Text()),
    )
    op.create_index('ix_order_items_order_id', 'order_items', ['order_id'])

    # Create order_status table
    op.create_table(
        'order_status',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('order_id', sa.Uuid(), sa.ForeignKey('orders.id'), unique=True, nullable=False),
        sa.Column('status', sa.String(50), default='Pending'),
        sa.Column('priority', sa.String(20), default='Normal'),
        sa.Column('time_elapsed', sa.Integer(), default=0),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create billing tables
    op.create_table(
        'payments',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('restaurant_id', sa.Uuid(), sa.ForeignKey('restaurants.id')),
        sa.Column('amount_cents', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(50), default='Success'),
        sa.Column('provider', sa.String(50)),
        sa.Column('transaction_id', sa.String(255)),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    op.create_table(
        'subscriptions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('plan_name', sa.String(50), unique=True, nullable=False),
        sa.Column('price_cents', sa.Integer(), nullable=False, default=0),
        sa.Column('billing_cycle', sa.String(20), default='monthly'),
        sa.Column('description', sa.Text()),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    op.create_table(
        'plan_features',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('plan_name', sa.String(50), nullable=False),
        sa.Column('feature', sa.String(255), nullable=False),
        sa.Column('is_enabled', sa.Boolean(), default=True),
    )
    op.create_index('ix_plan_features_plan_name', 'plan_features', ['plan_name'])

    # Create support and feedback tables
    op.create_table(
        'support_tickets',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('restaurant_id', sa.Uuid(), sa.ForeignKey('restaurants.id')),
        sa.Column('subject', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', sa.String(20), default='Open'),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    op.create_table(
        'feedback',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('order_id', sa.Uuid(), sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('restaurant_id', sa.Uuid(), sa.ForeignKey('restaurants.id'), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    # Create logs and webhooks tables
    op.create_table(
        'logs',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id')),
        sa.Column('level', sa.String(20), default='info'),
        sa.Column('action', sa.String(100), nullable=False),
        sa.Column('details', sa.JSON()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    op.create_table(
        'webhooks',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('provider', sa.String(50), nullable=False),
        sa.Column('event_type', sa.String(100), nullable=False),
        sa.Column('payload', sa.JSON()),
        sa.Column('received_at', sa.DateTime(), default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table('webhooks')
    op.drop_table('logs')
    op.drop_table('feedback')
    op.drop_table('support_tickets')
    op.drop_table('plan_features')
    op.drop_table('subscriptions')
    op.drop_table('payments')
    op.drop_table('order_status')
    op.drop_table('order_items')
    op.drop_table('orders')
    op.drop_table('menus')
    op.drop_table('sessions')
    op.drop_table('restaurants')
    op.drop_table('users')
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
