import pytest

from travel_booking.shared.domain import Currency


class TestCurrency:
    def test_code_is_normalized_to_upper_case(self):
        assert Currency("usd").code == "USD"

    def test_unsupported_currency_raises_error(self):
        with pytest.raises(ValueError, match="Unsupported currency"):
            Currency("GBP")

    def test_default_currency_is_usd(self):
        assert Currency.default() == Currency.usd()
