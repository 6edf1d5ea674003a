"""create core tables

Revision ID: 202610010000
Revises: 
Create Date: 2026-10-01 09:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '202610010000'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create users table
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Enum('ADMIN', 'ADVERTISER', 'PARTNER', name='userrole'), nullable=False),
        sa.Column('company_name', sa.String(length=200), nullable=True),
        sa.Column('contact_person', sa.String(length=100), nullable=True),
        sa.Column('phone_number', sa.String(length=30), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('profile_image', sa.String(length=500), nullable=True),
        sa.Column('website', sa.String(length=500), nullable=True),
        sa.Column('social_links', sa.JSON(), nullable=True),
        sa.Column('specialties', sa.JSON(), nullable=True),
        sa.Column('follower_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('engagement_rate', sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])

    # Create campaigns table
    op.create_table('campaigns',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('advertiser_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('daily_budget', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('total_budget', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('target_filters', sa.JSON(), nullable=True),
        sa.Column('recruitment_start_date', sa.DateTime(), nullable=False),
        sa.Column('recruitment_end_date', sa.DateTime(), nullable=False),
        sa.Column('campaign_start_date', sa.DateTime(), nullable=False),
        sa.Column('campaign_end_date', sa.DateTime(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='draft'),
        sa.Column('max_partners', sa.Integer(), nullable=False, server_default='10'),
        sa.Column('selected_partners', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('qr_code_url', sa.String(length=500), nullable=True),
        sa.Column('product_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['advertiser_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_campaigns_id', 'campaigns', ['id'])
    op.create_index('ix_campaigns_advertiser_id', 'campaigns', ['advertiser_id'])
    op.create_index('ix_campaigns_status', 'campaigns', ['status'])

    # Create campaign_applications table
    op.create_table('campaign_applications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('campaign_id', sa.Integer(), nullable=False),
        sa.Column('partner_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('application_message', sa.Text(), nullable=True),
        sa.Column('applied_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        sa.Column('reviewed_by', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['campaign_id'], ['campaigns.id'], ),
        sa.ForeignKeyConstraint(['partner_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['reviewed_by'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_campaign_applications_id', 'campaign_applications', ['id'])
    op.create_index('ix_campaign_applications_campaign_id', 'campaign_applications', ['campaign_id'])
    op.create_index('ix_campaign_applications_partner_id', 'campaign_applications', ['partner_id'])

    # Create sample_products table
    op.create_table('sample_products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('campaign_id', sa.Integer(), nullable=False),
        sa.Column('partner_id', sa.Integer(), nullable=False),
        sa.Column('product_name', sa.String(length=200), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('tracking_number', sa.String(length=100), nullable=True),
        sa.Column('requested_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('approved_at', sa.DateTime(), nullable=True),
        sa.Column('shipped_at', sa.DateTime(), nullable=True),
        sa.Column('delivered_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['campaign_id'], ['campaigns.id'], ),
        sa.ForeignKeyConstraint(['partner_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_sample_products_id', 'sample_products', ['id'])
    op.create_index('ix_sample_products_campaign_id', 'sample_products', ['campaign_id'])
    op.create_index('ix_sample_products_partner_id', 'sample_products', ['partner_id'])

    # Create shipping_records table
    op.create_table('shipping_records',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('campaign_id', sa.Integer(), nullable=False),
        sa.Column('partner_id', sa.Integer(), nullable=False),
        sa.Column('shipping_date', sa.DateTime(), nullable=False),
        sa.Column('tracking_number', sa.String(length=100), nullable=False),
        sa.Column('product_name', sa.String(length=200), nullable=False),
        sa.Column('recipient_info', sa.JSON(), nullable=True),
        sa.Column('memo', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='shipped'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['campaign_id'], ['campaigns.id'], ),
        sa.ForeignKeyConstraint(['partner_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_shipping_records_id', 'shipping_records', ['id'])
    op.create_index('ix_shipping_records_campaign_id', 'shipping_records', ['campaign_id'])
    op.create_index('ix_shipping_records_partner_id', 'shipping_records', ['partner_id'])
    op.create_index('ix_shipping_records_shipping_date', 'shipping_records', ['shipping_date'])
    op.create_index('ix_shipping_records_status', 'shipping_records', ['status'])

    # Create performance_metrics table
    op.create_table('performance_metrics',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('campaign_id', sa.Integer(), nullable=False),
        sa.Column('partner_id', sa.Integer(), nullable=True),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('qr_scans', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('conversions', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('revenue', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('delivery_rate', sa.Numeric(precision=5, scale=2), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['campaign_id'], ['campaigns.id'], ),
        sa.ForeignKeyConstraint(['partner_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_performance_metrics_id', 'performance_metrics', ['id'])
    op.create_index('ix_performance_metrics_campaign_id', 'performance_metrics', ['campaign_id'])
    op.create_index('ix_performance_metrics_partner_id', 'performance_metrics', ['partner_id'])
    op.create_index('ix_performance_metrics_date', 'performance_metrics', ['date'])

    # Create partner_categories table
    op.create_table('partner_categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('partner_id', sa.Integer(), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('delivery_capacity', sa.Integer(), nullable=False),
        sa.Column('success_rate', sa.Numeric(precision=5, scale=2), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.ForeignKeyConstraint(['partner_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_partner_categories_id', 'partner_categories', ['id'])
    op.create_index('ix_partner_categories_partner_id', 'partner_categories', ['partner_id'])

    # Create payments table
    op.create_table('payments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('campaign_id', sa.Integer(), nullable=False),
        sa.Column('advertiser_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('payment_method', sa.String(length=50), nullable=False),
        sa.Column('transaction_id', sa.String(length=100), nullable=True),
        sa.Column('processed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['campaign_id'], ['campaigns.id'], ),
        sa.ForeignKeyConstraint(['advertiser_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_payments_id', 'payments', ['id'])
    op.create_index('ix_payments_campaign_id', 'payments', ['campaign_id'])
    op.create_index('ix_payments_advertiser_id', 'payments', ['advertiser_id'])

    # Create partner_earnings table
    op.create_table('partner_earnings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('partner_id', sa.Integer(), nullable=False),
        sa.Column('campaign_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('earned_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('paid_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['partner_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['campaign_id'], ['campaigns.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_partner_earnings_id', 'partner_earnings', ['id'])
    op.create_index('ix_partner_earnings_partner_id', 'partner_earnings', ['partner_id'])
    op.create_index('ix_partner_earnings_campaign_id', 'partner_earnings', ['campaign_id'])


def downgrade() -> None:
    op.drop_table('partner_earnings')
    op.drop_table('payments')
    op.drop_table('partner_categories')
    op.drop_table('performance_metrics')
    op.drop_table('shipping_records')
    op.drop_table('sample_products')
    op.drop_table('campaign_applications')
    op.drop_table('campaigns')
    op.drop_table('users')
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
