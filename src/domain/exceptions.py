"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure.

Taxonomie:
----------
- UnauthenticatedError: Pas de session utilisateur / token invalide
- ForbiddenError: Token valide mais pour un autre utilisateur
- InvalidBillingRequestError / InvalidCpfError: Requete mal formee
- ProviderCallFailedError: Le provider a refuse la cobranca
- MalformedProviderResponseError: Reponse provider sans id/url
- PersistenceFailedError: Cobranca creee chez le provider, ecriture locale echouee
- SubscriptionInitiationFailedError / MalformedResponseError: cote client
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class UnauthenticatedError(DomainException):
    """Leve quand aucun utilisateur authentifie n'est disponible."""

    def __init__(self, reason: str | None = None) -> None:
        message = "Utilisateur non authentifie."
        if reason:
            message += f" Raison: {reason}"
        super().__init__(message, code="UNAUTHENTICATED")
        self.reason = reason


class ForbiddenError(DomainException):
    """Leve quand le token ne correspond pas a l'utilisateur demande."""

    def __init__(self, token_user_id: str, requested_user_id: Any) -> None:
        super().__init__(
            f"Le token de '{token_user_id}' ne permet pas d'agir "
            f"pour '{requested_user_id}'",
            code="FORBIDDEN"
        )
        self.token_user_id = token_user_id
        self.requested_user_id = requested_user_id


class InvalidBillingRequestError(DomainException):
    """Leve quand une requete de cobranca ne respecte pas le schema."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            "Requete de cobranca invalide: " + "; ".join(errors),
            code="INVALID_BILLING_REQUEST"
        )
        self.errors = errors


class InvalidCpfError(DomainException):
    """Leve quand un CPF est invalide."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        message = f"CPF invalide: '{value}'."
        if reason:
            message += f" Raison: {reason}"
        super().__init__(message, code="INVALID_CPF")
        self.invalid_value = value


class InvalidAmountError(DomainException):
    """Leve quand un montant n'est pas un nombre positif d'au moins un centime."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Montant invalide: '{value}'. Le montant doit valoir au moins un centime.",
            code="INVALID_AMOUNT"
        )
        self.invalid_value = value


class ProviderCallFailedError(DomainException):
    """Leve quand le provider de paiement repond en erreur."""

    def __init__(
        self,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        message = "Echec de l'appel au provider de paiement"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        super().__init__(message, code="PROVIDER_CALL_FAILED")
        self.status_code = status_code
        self.body = body


class MalformedProviderResponseError(DomainException):
    """Leve quand la reponse du provider ne contient pas data.id / data.url."""

    def __init__(self, missing: str) -> None:
        super().__init__(
            f"Reponse du provider incomplete: champ '{missing}' absent",
            code="MALFORMED_PROVIDER_RESPONSE"
        )
        self.missing = missing


class PersistenceFailedError(DomainException):
    """
    Leve quand l'ecriture locale echoue apres la creation de la cobranca.

    La cobranca existe chez le provider sans enregistrement local.
    """

    def __init__(self, user_id: str, billing_id: str, cause: str) -> None:
        super().__init__(
            f"Echec d'enregistrement de la cobranca '{billing_id}' "
            f"pour '{user_id}': {cause}",
            code="PERSISTENCE_FAILED"
        )
        self.user_id = user_id
        self.billing_id = billing_id


class SubscriptionInitiationFailedError(DomainException):
    """Leve cote client quand la creation d'assinatura echoue."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Echec de l'initiation de l'assinatura: {reason}",
            code="SUBSCRIPTION_INITIATION_FAILED"
        )
        self.reason = reason


class MalformedResponseError(SubscriptionInitiationFailedError):
    """Reponse 2xx sans flag success ou sans redirect_url."""

    def __init__(self, missing: str) -> None:
        super().__init__(f"reponse du serveur invalide ({missing})")
        self.code = "MALFORMED_RESPONSE"
        self.missing = missing
