"""
SQL form of the liveness rule shared by the status resolver, hold check and confirmation.

Mirrors `is_live` in the booking entity:
    status = CONFIRMED OR (status = HELD AND created_at > now - ttl)
"""

from datetime import datetime, timedelta
import uuid

from sqlalchemy import ColumnElement, and_, or_
from uuid_utils import UUID

from src.service.reservation.domain.entity.booking_entity import liveness_cutoff
from src.service.reservation.domain.enum.booking_status import BookingStatus
from src.service.reservation.driven_adapter.model.booking_model import BookingModel


def live_claim_condition(*, now: datetime, ttl: timedelta) -> ColumnElement[bool]:
    cutoff = liveness_cutoff(now=now, ttl=ttl)
    return or_(
        BookingModel.status == BookingStatus.CONFIRMED.value,
        and_(
            BookingModel.status == BookingStatus.HELD.value,
            BookingModel.created_at > cutoff,
        ),
    )


def to_db_uuid(value: UUID | uuid.UUID | str) -> uuid.UUID:
    """uuid_utils.UUID -> stdlib uuid.UUID for the SQLAlchemy Uuid column"""
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))
