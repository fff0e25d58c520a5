from decimal import Decimal, InvalidOperation

from dtos import InvoicingPolicy
from utils.exceptions import InvalidPrice

VAT_RATE = 21
NO_VAT_RATE = 0
# at most 6 decimal places and below 10^13
MIN_PRICE_EXPONENT = -6
MAX_PRICE_EXPONENT = 12


class PricingService:
    def __init__(self, policy: InvoicingPolicy):
        self.policy = policy

    @staticmethod
    def parse_price(raw_price: str) -> Decimal:
        try:
            price = Decimal(raw_price.strip())
        except (InvalidOperation, AttributeError):
            raise InvalidPrice(
                f'Price "{raw_price}" has to be a valid number greater than 0'
            ) from None

        if (
            not price.is_finite()
            or price <= 0
            or price.adjusted() > MAX_PRICE_EXPONENT
            or price.as_tuple().exponent < MIN_PRICE_EXPONENT
        ):
            raise InvalidPrice(
                f'Price "{raw_price}" has to be greater than 0, below 10^13 '
                "and have at most 6 decimal places"
            )
        return price

    @property
    def vat_rate(self) -> int:
        return VAT_RATE if self.policy.include_vat else NO_VAT_RATE

    def unit_price(self, price: Decimal) -> Decimal:
        """Net unit price sent to Fakturoid.

        A VAT-inclusive price has the 21% component removed with the exact
        100/121 ratio, so the same input always yields the same net amount.
        """
        if self.policy.include_vat:
            return price * 100 / (100 + VAT_RATE)
        return price
