from abc import ABC, abstractmethod


class IBookingCodeGenerator(ABC):
    @abstractmethod
    def generate(self) -> str:
        """Random human-readable confirmation code (uniqueness is checked by the store)"""
        pass
