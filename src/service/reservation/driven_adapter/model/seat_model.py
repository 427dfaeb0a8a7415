from sqlalchemy import Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class SeatCategoryModel(Base):
    __tablename__ = 'seat_categories'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)


class SeatModel(Base):
    __tablename__ = 'seats'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hall_id: Mapped[int] = mapped_column(ForeignKey('halls.id'), nullable=False, index=True)
    row_label: Mapped[str] = mapped_column(String(4), nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    category_id: Mapped[int] = mapped_column(ForeignKey('seat_categories.id'), nullable=False)

    __table_args__ = (UniqueConstraint('hall_id', 'row_label', 'number', name='uq_seat_position'),)
