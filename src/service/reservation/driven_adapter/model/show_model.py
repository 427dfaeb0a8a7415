from datetime import datetime

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base, UtcDateTime


class ShowModel(Base):
    __tablename__ = 'shows'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column(ForeignKey('movies.id'), nullable=False, index=True)
    hall_id: Mapped[int] = mapped_column(ForeignKey('halls.id'), nullable=False)
    start_time: Mapped[datetime] = mapped_column(UtcDateTime, nullable=False)
