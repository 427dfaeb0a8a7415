from datetime import datetime
import uuid

from sqlalchemy import ForeignKey, Index, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base, UtcDateTime


class BookingModel(Base):
    __tablename__ = 'bookings'

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)  # UUID7
    show_id: Mapped[int] = mapped_column(ForeignKey('shows.id'), nullable=False)
    contact: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='HELD')
    booking_code: Mapped[str] = mapped_column(String(16), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(UtcDateTime, nullable=False)

    __table_args__ = (
        Index('ix_bookings_show_status', 'show_id', 'status'),
        Index('ix_bookings_status_created_at', 'status', 'created_at'),
    )


class BookingSeatModel(Base):
    """Seat claim of a booking; `position` keeps the order the seats were requested in"""

    __tablename__ = 'booking_seats'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('bookings.id'), nullable=False
    )
    seat_id: Mapped[int] = mapped_column(ForeignKey('seats.id'), nullable=False, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (UniqueConstraint('booking_id', 'seat_id', name='uq_booking_seat'),)
