"""
Value Object pour les montants monetaires.

Le provider AbacatePay attend des prix entiers en centimes
(unites mineures). La conversion passe par Decimal pour eviter
les derives de la virgule flottante: 9.905 * 100 donne 990.4999...
en float, mais doit etre transmis comme 991.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from src.domain.exceptions import InvalidAmountError


CURRENCY_SYMBOLS = {
    "BRL": "R$",
    "USD": "$",
    "EUR": "€",
}

MINOR_UNITS_FACTOR = Decimal(100)


@dataclass(frozen=True, slots=True)
class Money:
    """
    Montant dans une devise donnee.

    Attributes:
        amount: Montant decimal en unites de la devise (ex: 9.90).
        currency: Code ISO 4217 (defaut: BRL).

    Example:
        >>> Money.from_any(9.90).to_minor_units()
        990
        >>> Money.from_any("9.905").to_minor_units()
        991
        >>> Money.from_any(9.90).format()
        'R$ 9,90'
    """

    amount: Decimal
    currency: str = "BRL"

    def __post_init__(self) -> None:
        """Valide le montant apres initialisation."""
        if not isinstance(self.amount, Decimal) or not self.amount.is_finite():
            raise InvalidAmountError(self.amount)
        if self.amount <= 0 or self.to_minor_units() < 1:
            raise InvalidAmountError(self.amount)
        object.__setattr__(self, "currency", self.currency.upper().strip())

    @classmethod
    def from_any(cls, value: Any, currency: str = "BRL") -> "Money":
        """
        Cree un Money depuis un float, int, str ou Decimal.

        Les floats sont convertis via leur representation textuelle
        (9.9 -> Decimal("9.9")), pas via leur valeur binaire exacte.

        Raises:
            InvalidAmountError: Si la valeur n'est pas un nombre positif.
        """
        if isinstance(value, bool) or value is None:
            raise InvalidAmountError(value)
        if isinstance(value, Decimal):
            return cls(amount=value, currency=currency)
        try:
            return cls(amount=Decimal(str(value).strip()), currency=currency)
        except InvalidOperation as e:
            raise InvalidAmountError(value) from e

    def to_minor_units(self) -> int:
        """Retourne le montant en centimes, arrondi au plus proche (half up)."""
        cents = (self.amount * MINOR_UNITS_FACTOR).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
        return int(cents)

    def quantized(self) -> Decimal:
        """Montant arrondi a 2 decimales (colonne Numeric(10, 2))."""
        return self.amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    @property
    def symbol(self) -> str:
        """Retourne le symbole de la devise."""
        return CURRENCY_SYMBOLS.get(self.currency, self.currency)

    def format(self) -> str:
        """Formate le montant a la bresilienne (ex: 'R$ 9,90')."""
        formatted = f"{self.quantized():,.2f}"
        formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
        return f"{self.symbol} {formatted}"

    def __str__(self) -> str:
        return self.format()
