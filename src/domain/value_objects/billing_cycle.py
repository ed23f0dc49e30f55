"""
Value Objects pour le cycle de facturation et le moyen de paiement.
"""

import calendar
from datetime import datetime
from enum import Enum


class BillingCycle(Enum):
    """
    Frequences de facturation acceptees par le provider.

    Seul MONTHLY est propose (plan mensuel PRAXIS).
    """

    MONTHLY = "MONTHLY"

    def next_charge_after(self, start: datetime) -> datetime:
        """
        Calcule la date du prochain paiement.

        Un mois calendaire plus tard; le jour est ramene au dernier
        jour du mois si necessaire (31/01 -> 28/02 ou 29/02).

        Args:
            start: Date de debut (conserve la timezone).

        Returns:
            Date du prochain paiement.
        """
        month = start.month + 1
        year = start.year
        if month > 12:
            month = 1
            year += 1
        last_day = calendar.monthrange(year, month)[1]
        return start.replace(year=year, month=month, day=min(start.day, last_day))


class PaymentMethod(Enum):
    """
    Moyens de paiement.

    Attributes:
        provider_code: Code attendu par l'API AbacatePay.
        value: Code stocke dans la table pagamentos.
    """

    PIX = "pix"

    @property
    def provider_code(self) -> str:
        """Code du moyen de paiement cote provider (ex: 'PIX')."""
        return self.value.upper()
