"""create_rsvps_table

Revision ID: r001_create_rsvps_table
Revises:
Create Date: 2025-06-30 10:12:04.118532

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'r001_create_rsvps_table'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'rsvps',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('phone_number', sa.String(length=10), nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=False),
        sa.Column('last_name', sa.String(length=50), nullable=False),
        sa.Column(
            'response',
            sa.Enum('Yes', 'Maybe', 'No', name='rsvp_response_enum'),
            nullable=False,
        ),
        sa.Column('comment', sa.String(length=500), nullable=True),
        sa.Column(
            'device_type',
            sa.Enum('iPhone', 'Android', 'Other', name='rsvp_device_type_enum'),
            nullable=False,
        ),
        sa.Column('wallet_pass_id', sa.String(), nullable=True),
        sa.Column('wallet_pass_url', sa.String(), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('CURRENT_TIMESTAMP'),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    # Unique index: one RSVP per phone number, enforced by the database
    op.create_index('ix_rsvps_phone_number', 'rsvps', ['phone_number'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_rsvps_phone_number', table_name='rsvps')
    op.drop_table('rsvps')
    sa.Enum(name='rsvp_device_type_enum').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='rsvp_response_enum').drop(op.get_bind(), checkfirst=True)
