"""User-facing message catalog.

Texts are in Turkish, the language of the client that renders them. Callers
translate rejection reasons through ``rejection_message`` rather than showing
reason codes.
"""

from transfer_engine.domain.value_objects.transfer_outcome import RejectionReason

REJECTION_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.INVALID_AMOUNT: "Geçerli bir tutar giriniz",
    RejectionReason.SAME_ACCOUNT: "Aynı hesaba transfer yapılamaz",
    RejectionReason.INSUFFICIENT_FUNDS: "Yetersiz bakiye",
    RejectionReason.RATE_UNAVAILABLE: "Döviz kuru bulunamadı",
}

ACCOUNTS_NOT_SELECTED = "Geçerli hesaplar seçiniz"
INVALID_CURRENCY = "Geçersiz para birimi"

SAME_CURRENCY_QUOTE = "Aynı para birimi - Çevrim gerekmez"
RATE_NOT_FOUND_QUOTE = "Döviz kuru bulunamadı"

TRANSFER_COMPLETED = "Transfer başarıyla tamamlandı"

# Ledger failures
LEDGER_UNKNOWN_ERROR = "Bilinmeyen hata"
LEDGER_TRANSFER_FAILED = "Transfer başarısız"
LEDGER_RATES_UNAVAILABLE = "Döviz kurları alınamadı"
LEDGER_NO_DATA = "Veri bulunamadı"
LEDGER_DECODING_ERROR = "Veri çözümleme hatası"


def rejection_message(reason: RejectionReason) -> str:
    """Localised text for a rejection reason."""
    return REJECTION_MESSAGES[reason]


def rate_quote_label(from_symbol: str, rate_text: str, to_symbol: str) -> str:
    """Rate label, e.g. '1 ₺ = 0.0310 $'."""
    return f"1 {from_symbol} = {rate_text} {to_symbol}"
