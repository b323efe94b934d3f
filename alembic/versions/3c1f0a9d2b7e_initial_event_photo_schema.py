"""Initial event photo sharing schema

Revision ID: 3c1f0a9d2b7e
Revises: 
Create Date: 2026-10-19 10:12:44.318201

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d2b7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    role_enum = sa.Enum('event_organizer', 'administrator', name='roleenum')

    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', role_enum, nullable=False, server_default='event_organizer'),
        sa.Column('subscription_status', sa.String(100), nullable=True),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column('upload_rate_limit', sa.Integer, nullable=False, server_default='10'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'event_themes',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('is_standard', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('image_url', sa.String(1024), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'events',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('organizer_id', sa.Integer, sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('topic', sa.String(255), nullable=True),
        sa.Column('text_color', sa.String(32), nullable=True),
        sa.Column('theme_id', sa.Integer, sa.ForeignKey('event_themes.id'), nullable=True),
        sa.Column('custom_theme_image_url', sa.String(1024), nullable=True),
        sa.Column('event_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('event_time', sa.String(32), nullable=True),
        sa.Column('address', sa.String(255), nullable=True),
        sa.Column('postcode', sa.String(32), nullable=True),
        sa.Column('city', sa.String(255), nullable=True),
        sa.Column('thank_you_message', sa.Text, nullable=True),
        sa.Column('qr_code_token', sa.String(64), nullable=False, unique=True),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('idx_event_organizer', 'events', ['organizer_id'])
    op.create_index('idx_event_theme', 'events', ['theme_id'])

    op.create_table(
        'event_programs',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('event_id', sa.Integer, sa.ForeignKey('events.id'), nullable=False),
        sa.Column('topic', sa.String(255), nullable=False),
        sa.Column('time', sa.String(32), nullable=False),
        sa.Column('order_index', sa.Integer, nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('idx_program_event', 'event_programs', ['event_id'])

    op.create_table(
        'contact_persons',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('event_id', sa.Integer, sa.ForeignKey('events.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('phone_number', sa.String(64), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('is_contact_person', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('idx_contact_event', 'contact_persons', ['event_id'])

    op.create_table(
        'guest_uploads',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('event_id', sa.Integer, sa.ForeignKey('events.id'), nullable=False),
        sa.Column('guest_name', sa.String(255), nullable=False),
        sa.Column('file_url', sa.String(1024), nullable=False),
        sa.Column('file_name', sa.String(255), nullable=False),
        sa.Column('file_size', sa.BigInteger, nullable=False),
        sa.Column('mime_type', sa.String(127), nullable=False),
        sa.Column('is_favorited', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('upload_ip', sa.String(64), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('idx_upload_event', 'guest_uploads', ['event_id'])
    op.create_index('idx_upload_event_ip_created', 'guest_uploads', ['event_id', 'upload_ip', 'created_at'])


def downgrade() -> None:
    op.drop_table('guest_uploads')
    op.drop_table('contact_persons')
    op.drop_table('event_programs')
    op.drop_table('events')
    op.drop_table('event_themes')
    op.drop_table('users')

    sa.Enum(name='roleenum').drop(op.get_bind(), checkfirst=True)
