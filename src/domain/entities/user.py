"""
Entite User - Utilisateur authentifie.

L'identite est geree par un fournisseur externe (session + token).
Cette application ne fait que la lire: pas de mot de passe,
pas de role, pas d'ecriture.

Attributes:
-----------
- id: Identifiant opaque attribue par le fournisseur d'identite
- email: Adresse email
- full_name: Nom complet (metadonnee de profil, optionnel)
- cpf: CPF (metadonnee de profil, optionnel)
- access_token: Token signe presente a l'API de facturation
"""

from dataclasses import dataclass
from typing import Any, Optional


DEFAULT_CUSTOMER_NAME = "Cliente"


@dataclass
class User:
    """
    Utilisateur de l'application.

    Example:
        >>> user = User(id="abc123", email="maria@x.com", full_name="Maria Silva")
        >>> user.display_name
        'Maria Silva'
        >>> User(id="abc123", email="joao@x.com").display_name
        'joao'
    """

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    cpf: Optional[str] = None
    access_token: Optional[str] = None

    @classmethod
    def from_session(cls, data: dict[str, Any]) -> "User":
        """
        Cree un User depuis les donnees de session du fournisseur d'identite.

        Format attendu:
            {"id": "...", "email": "...", "access_token": "...",
             "user_metadata": {"full_name": "...", "cpf": "..."}}
        """
        metadata = data.get("user_metadata") or {}
        return cls(
            id=str(data["id"]),
            email=data.get("email"),
            full_name=metadata.get("full_name"),
            cpf=metadata.get("cpf"),
            access_token=data.get("access_token"),
        )

    @property
    def display_name(self) -> str:
        """Nom complet, sinon partie locale de l'email, sinon 'Cliente'."""
        if self.full_name and self.full_name.strip():
            return self.full_name.strip()
        if self.email:
            local_part = self.email.split("@")[0].strip()
            if local_part:
                return local_part
        return DEFAULT_CUSTOMER_NAME

    def __eq__(self, other: object) -> bool:
        """Compare par ID."""
        if isinstance(other, User):
            return self.id == other.id
        return False

    def __hash__(self) -> int:
        """Hash base sur l'ID."""
        return hash(self.id)
