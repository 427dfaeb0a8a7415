from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Current instant as a timezone-aware UTC datetime"""
        pass
