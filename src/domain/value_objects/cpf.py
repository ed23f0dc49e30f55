"""
Value Object pour le CPF (identifiant fiscal bresilien).

Le CPF transmis au provider comme taxId doit contenir 11 chiffres.
Les caracteres de formatage ("123.456.789-09") sont retires.

Le placeholder "00000000000" est accepte par defaut (le client
l'envoie quand le profil n'a pas de CPF) mais peut etre refuse
explicitement via `Cpf.parse(value, allow_placeholder=False)`.
"""

import re
from dataclasses import dataclass
from typing import Any

from src.domain.exceptions import InvalidCpfError


CPF_LENGTH = 11
CPF_PLACEHOLDER = "0" * CPF_LENGTH

_NON_DIGITS = re.compile(r"[.\-\s/]")


@dataclass(frozen=True, slots=True)
class Cpf:
    """
    CPF normalise (11 chiffres).

    Attributes:
        value: Les 11 chiffres du CPF.

    Example:
        >>> Cpf.parse("123.456.789-09").value
        '12345678909'
        >>> Cpf.parse("00000000000").is_placeholder
        True
    """

    value: str

    def __post_init__(self) -> None:
        """Valide le CPF apres initialisation."""
        if not isinstance(self.value, str):
            raise InvalidCpfError(self.value, "doit etre une chaine")
        if len(self.value) != CPF_LENGTH or not self.value.isdigit():
            raise InvalidCpfError(self.value, f"{CPF_LENGTH} chiffres attendus")

    @classmethod
    def parse(cls, value: Any, allow_placeholder: bool = True) -> "Cpf":
        """
        Normalise et valide un CPF.

        Args:
            value: CPF brut, formate ou non.
            allow_placeholder: False pour refuser "00000000000".

        Returns:
            Cpf valide.

        Raises:
            InvalidCpfError: Si absent, mal forme, ou placeholder refuse.
        """
        if value is None:
            raise InvalidCpfError(value, "obligatoire")

        digits = _NON_DIGITS.sub("", str(value))
        if not digits:
            raise InvalidCpfError(value, "obligatoire")

        cpf = cls(digits)
        if cpf.is_placeholder and not allow_placeholder:
            raise InvalidCpfError(value, "CPF non renseigne")
        return cpf

    @classmethod
    def placeholder(cls) -> "Cpf":
        """Factory pour le CPF sentinelle (profil sans CPF)."""
        return cls(CPF_PLACEHOLDER)

    @property
    def is_placeholder(self) -> bool:
        """True si c'est le CPF sentinelle tout a zero."""
        return self.value == CPF_PLACEHOLDER

    def __str__(self) -> str:
        return self.value
