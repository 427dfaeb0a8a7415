"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- movies, halls, shows: catalog
- seat_categories, seats: per-hall seat map with pricing
- bookings: holds / confirmed bookings (UUID7 primary key, unique booking_code)
- booking_seats: seat claims of a booking in request order
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables with final schema."""

    # ========== Catalog ==========
    op.create_table(
        'movies',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('poster_url', sa.String(length=512), nullable=False),
    )

    op.create_table(
        'halls',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('total_rows', sa.Integer(), nullable=False),
        sa.Column('total_cols', sa.Integer(), nullable=False),
    )

    op.create_table(
        'shows',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('movie_id', sa.Integer(), sa.ForeignKey('movies.id'), nullable=False),
        sa.Column('hall_id', sa.Integer(), sa.ForeignKey('halls.id'), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_shows_movie_id', 'shows', ['movie_id'])

    op.create_table(
        'seat_categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=50), nullable=False, unique=True),
        sa.Column('price', sa.Float(), nullable=False),
    )

    op.create_table(
        'seats',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('hall_id', sa.Integer(), sa.ForeignKey('halls.id'), nullable=False),
        sa.Column('row_label', sa.String(length=4), nullable=False),
        sa.Column('number', sa.Integer(), nullable=False),
        sa.Column(
            'category_id', sa.Integer(), sa.ForeignKey('seat_categories.id'), nullable=False
        ),
        sa.UniqueConstraint('hall_id', 'row_label', 'number', name='uq_seat_position'),
    )
    op.create_index('ix_seats_hall_id', 'seats', ['hall_id'])

    # ========== Ledger ==========
    op.create_table(
        'bookings',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('show_id', sa.Integer(), sa.ForeignKey('shows.id'), nullable=False),
        sa.Column('contact', sa.String(length=255), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('booking_code', sa.String(length=16), nullable=False, unique=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_bookings_contact', 'bookings', ['contact'])
    op.create_index('ix_bookings_show_status', 'bookings', ['show_id', 'status'])
    op.create_index('ix_bookings_status_created_at', 'bookings', ['status', 'created_at'])

    op.create_table(
        'booking_seats',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('booking_id', sa.Uuid(), sa.ForeignKey('bookings.id'), nullable=False),
        sa.Column('seat_id', sa.Integer(), sa.ForeignKey('seats.id'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.UniqueConstraint('booking_id', 'seat_id', name='uq_booking_seat'),
    )
    op.create_index('ix_booking_seats_seat_id', 'booking_seats', ['seat_id'])


def downgrade() -> None:
    op.drop_table('booking_seats')
    op.drop_table('bookings')
    op.drop_table('seats')
    op.drop_table('seat_categories')
    op.drop_table('shows')
    op.drop_table('halls')
    op.drop_table('movies')
