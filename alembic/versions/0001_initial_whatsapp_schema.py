"""initial whatsapp schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(updated: bool = True) -> list[sa.Column]:
    columns = [sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())]
    if updated:
        columns.append(sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()))
    return columns


def upgrade() -> None:
    op.create_table(
        'enterprises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('cep', sa.Text(), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('number', sa.Text(), nullable=False),
        sa.Column('complement', sa.Text(), nullable=True),
        sa.Column('city', sa.Text(), nullable=False),
        sa.Column('state', sa.Text(), nullable=False),
        sa.Column('instagram_url', sa.Text(), nullable=True),
        sa.Column('phone_number', sa.Text(), nullable=False),
        sa.Column('register', sa.Text(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        'profiles',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('phone', sa.String(length=256), nullable=False),
        sa.Column('role', sa.Text(), nullable=False, server_default='user'),
        sa.Column('status', sa.Text(), nullable=False, server_default='active'),
        sa.Column('profile_picture', sa.Text(), nullable=True),
        sa.Column('enterprise_id', sa.Uuid(), sa.ForeignKey('enterprises.id'), nullable=False, index=True),
        *_timestamps(),
    )

    op.create_table(
        'projects',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.Column('status', sa.Text(), nullable=False, server_default='active'),
        sa.Column('category', sa.Text(), nullable=False),
        sa.Column('slug', sa.Text(), nullable=False),
        sa.Column('enterprise_id', sa.Uuid(), sa.ForeignKey('enterprises.id'), nullable=False, index=True),
        *_timestamps(),
    )

    op.create_table(
        'whatsapp_bots',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('project_id', sa.Uuid(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('instance_id', sa.Text(), nullable=False, index=True),
        sa.Column('api_token', sa.Text(), nullable=False),
        sa.Column('webhook_url', sa.Text(), nullable=True),
        sa.Column('status', sa.Text(), nullable=False, server_default='inactive'),
        *_timestamps(),
    )

    op.create_table(
        'whatsapp_contacts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('bot_id', sa.Uuid(), sa.ForeignKey('whatsapp_bots.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('phone', sa.Text(), nullable=False),
        sa.Column('name', sa.Text(), nullable=True),
        sa.Column('last_interaction_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('bot_id', 'phone', name='uq_whatsapp_contacts_bot_phone'),
    )

    op.create_table(
        'whatsapp_menus',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('bot_id', sa.Uuid(), sa.ForeignKey('whatsapp_bots.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        'whatsapp_responses',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('bot_id', sa.Uuid(), sa.ForeignKey('whatsapp_bots.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('response_text', sa.Text(), nullable=True),
        sa.Column('response_type', sa.Text(), nullable=False, server_default='text'),
        sa.Column(
            'menu_id',
            sa.Uuid(),
            sa.ForeignKey('whatsapp_menus.id', ondelete='SET NULL', name='fk_whatsapp_responses_menu_id'),
            nullable=True,
        ),
        *_timestamps(),
    )

    op.create_table(
        'whatsapp_menu_options',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('menu_id', sa.Uuid(), sa.ForeignKey('whatsapp_menus.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('option_text', sa.Text(), nullable=False),
        sa.Column('option_value', sa.Text(), nullable=True),
        sa.Column('response_id', sa.Uuid(), sa.ForeignKey('whatsapp_responses.id', ondelete='SET NULL'), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    op.create_table(
        'whatsapp_triggers',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('bot_id', sa.Uuid(), sa.ForeignKey('whatsapp_bots.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('trigger_text', sa.Text(), nullable=False),
        sa.Column('match_type', sa.Text(), nullable=False, server_default='exact'),
        sa.Column('priority', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('response_id', sa.Uuid(), sa.ForeignKey('whatsapp_responses.id', ondelete='CASCADE'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        *_timestamps(),
    )
    # Evaluation order lookup
    op.create_index(
        'ix_whatsapp_triggers_bot_active_priority',
        'whatsapp_triggers',
        ['bot_id', 'is_active', 'priority', 'created_at'],
    )

    op.create_table(
        'whatsapp_messages',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('bot_id', sa.Uuid(), sa.ForeignKey('whatsapp_bots.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('contact_id', sa.Uuid(), sa.ForeignKey('whatsapp_contacts.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('phone', sa.Text(), nullable=False),
        sa.Column('message_id', sa.Text(), nullable=True, index=True),
        sa.Column('direction', sa.Text(), nullable=False),
        sa.Column('message_text', sa.Text(), nullable=False),
        sa.Column('message_type', sa.Text(), nullable=False, server_default='text'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(), index=True),
    )


def downgrade() -> None:
    op.drop_table('whatsapp_messages')
    op.drop_index('ix_whatsapp_triggers_bot_active_priority', table_name='whatsapp_triggers')
    op.drop_table('whatsapp_triggers')
    op.drop_table('whatsapp_menu_options')
    op.drop_table('whatsapp_responses')
    op.drop_table('whatsapp_menus')
    op.drop_table('whatsapp_contacts')
    op.drop_table('whatsapp_bots')
    op.drop_table('projects')
    op.drop_table('profiles')
    op.drop_table('enterprises')
