"""create cattle and events tables

Revision ID: 4f2c8d1e7a30
Revises:
Create Date: 2025-11-03 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f2c8d1e7a30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'cattle',
        sa.Column('cattle_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_user_id', sa.Integer(), nullable=False),
        sa.Column('ear_tag', sa.String(length=64), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('cattle_id', name='pk_cattle'),
    )
    op.create_index('ix_cattle_owner_user_id', 'cattle', ['owner_user_id'])

    op.create_table(
        'events',
        sa.Column('event_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('cattle_id', sa.Integer(), nullable=False),
        sa.Column('event_type', sa.String(length=32), nullable=False),
        sa.Column('event_datetime', sa.DateTime(timezone=True), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('event_id', name='pk_events'),
        sa.ForeignKeyConstraint(
            ['cattle_id'], ['cattle.cattle_id'],
            name='fk_events_cattle_id_cattle', ondelete='CASCADE',
        ),
    )
    op.create_index('ix_events_cattle_datetime', 'events', ['cattle_id', 'event_datetime'])
    op.create_index('ix_events_type', 'events', ['event_type'])


def downgrade() -> None:
    op.drop_index('ix_events_type', table_name='events')
    op.drop_index('ix_events_cattle_datetime', table_name='events')
    op.drop_table('events')
    op.drop_index('ix_cattle_owner_user_id', table_name='cattle')
    op.drop_table('cattle')
