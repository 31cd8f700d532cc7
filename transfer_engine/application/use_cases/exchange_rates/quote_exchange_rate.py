"""Quote exchange rate use case."""

from transfer_engine.application import messages
from transfer_engine.application.dto.exchange_rate_dto import (
    ExchangeRateQuoteOutput,
    QuoteExchangeRateInput,
)
from transfer_engine.application.exceptions import ValidationError
from transfer_engine.application.ports.outbound.exchange_rate_query_port import (
    ExchangeRateQueryPort,
)
from transfer_engine.application.use_cases.exchange_rates.rate_snapshot import (
    load_rate_table,
)
from transfer_engine.domain.exceptions import UnsupportedCurrencyError
from transfer_engine.domain.services.transfer_resolver import SAME_CURRENCY_RATE
from transfer_engine.domain.value_objects.currency import CurrencyRegistry

RATE_DISPLAY_PLACES = 4


class QuoteExchangeRateUseCase:
    """
    Use case describing which rate a transfer between two currencies uses.

    Shown next to the account pickers before the user confirms a transfer.
    The lookup mirrors the resolver's: ordered pair, no inverse.
    """

    def __init__(self, rates: ExchangeRateQueryPort, currencies: CurrencyRegistry):
        """
        Initialize use case.

        Args:
            rates: Rate query collaborator
            currencies: Registry to resolve numeric currency codes
        """
        self.rates = rates
        self.currencies = currencies

    async def execute(self, quote_input: QuoteExchangeRateInput) -> ExchangeRateQuoteOutput:
        """
        Quote the rate for a currency pair.

        Args:
            quote_input: Numeric codes of the source and target currencies

        Returns:
            Quote with display label

        Raises:
            ValidationError: If a currency code is not supported
            ExternalServiceError: If the rate service cannot be queried
        """
        try:
            source = self.currencies.get(quote_input.from_currency)
            target = self.currencies.get(quote_input.to_currency)
        except UnsupportedCurrencyError as e:
            raise ValidationError(
                message=messages.INVALID_CURRENCY,
                field="currency",
                constraint=e.message,
            )

        if source == target:
            return ExchangeRateQuoteOutput(
                from_currency=source.code,
                to_currency=target.code,
                same_currency=True,
                available=True,
                rate=SAME_CURRENCY_RATE,
                label=messages.SAME_CURRENCY_QUOTE,
            )

        table = await load_rate_table(self.rates)
        rate = table.find(source, target)
        if rate is None:
            return ExchangeRateQuoteOutput(
                from_currency=source.code,
                to_currency=target.code,
                same_currency=False,
                available=False,
                label=messages.RATE_NOT_FOUND_QUOTE,
            )

        return ExchangeRateQuoteOutput(
            from_currency=source.code,
            to_currency=target.code,
            same_currency=False,
            available=True,
            rate=rate.rate,
            label=messages.rate_quote_label(
                source.symbol, f"{rate.rate:.{RATE_DISPLAY_PLACES}f}", target.symbol
            ),
        )
