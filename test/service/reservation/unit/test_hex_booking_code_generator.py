import re

import pytest

from src.service.reservation.driven_adapter.system.hex_booking_code_generator import (
    HexBookingCodeGenerator,
)


@pytest.mark.unit
class TestHexBookingCodeGenerator:
    def test_default_code_is_8_lowercase_hex_chars(self) -> None:
        code = HexBookingCodeGenerator().generate()

        assert re.fullmatch(r'[0-9a-f]{8}', code)

    def test_num_bytes_controls_length(self) -> None:
        assert len(HexBookingCodeGenerator(num_bytes=6).generate()) == 12

    def test_codes_vary(self) -> None:
        generator = HexBookingCodeGenerator()

        assert len({generator.generate() for _ in range(50)}) > 1
