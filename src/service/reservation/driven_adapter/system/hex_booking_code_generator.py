import secrets

from src.service.reservation.app.interface.i_booking_code_generator import IBookingCodeGenerator


class HexBookingCodeGenerator(IBookingCodeGenerator):
    """4 random bytes, hex encoded: 8 lowercase hex characters such as '9f1c03ab'"""

    def __init__(self, *, num_bytes: int = 4) -> None:
        self.num_bytes = num_bytes

    def generate(self) -> str:
        return secrets.token_hex(self.num_bytes)
