"""
JWTService - Verification des tokens d'acces.

Responsabilite unique:
----------------------
Valider les tokens JWT signes par le fournisseur d'identite
(secret partage, HS256) et en extraire l'identifiant utilisateur.
Le bearer n'est jamais l'ID brut de l'utilisateur.

Usage:
------
    service = JWTService(settings)
    payload = service.verify_access_token(token)
    payload.user_id  # claim "sub"
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt.exceptions import PyJWTError

from src.presentation.api.config import APISettings


@dataclass
class TokenPayload:
    """
    Payload decode d'un token JWT.

    Attributes:
        user_id: ID de l'utilisateur (claim "sub").
        email: Email (claim "email", optionnel).
        exp: Date d'expiration.
    """

    user_id: str
    email: Optional[str]
    exp: datetime


class JWTService:
    """
    Service de gestion JWT.

    Verifie les tokens d'acces; sait aussi en emettre
    (tests, outils de dev locaux).
    """

    def __init__(self, settings: APISettings):
        """
        Initialise le service.

        Args:
            settings: Configuration API.
        """
        self._secret = settings.jwt_secret_key
        self._algorithm = settings.jwt_algorithm
        self._access_expire = settings.jwt_access_expire_minutes
        self._audience = settings.jwt_audience

    def create_access_token(
        self,
        user_id: str,
        email: Optional[str] = None,
        expires_in: Optional[timedelta] = None,
    ) -> str:
        """
        Cree un access token.

        Args:
            user_id: ID de l'utilisateur.
            email: Email de l'utilisateur.
            expires_in: Duree de vie (defaut: jwt_access_expire_minutes).

        Returns:
            Token JWT signe.
        """
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + (expires_in or timedelta(minutes=self._access_expire)),
        }
        if email:
            payload["email"] = email
        if self._audience:
            payload["aud"] = self._audience
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify_access_token(self, token: str) -> Optional[TokenPayload]:
        """
        Verifie un access token.

        Args:
            token: Token JWT.

        Returns:
            TokenPayload si valide, None sinon.
        """
        payload = self._decode(token)
        if not payload or not payload.get("sub"):
            return None

        return TokenPayload(
            user_id=str(payload["sub"]),
            email=payload.get("email"),
            exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    def _decode(self, token: str) -> Optional[dict]:
        """Decode un JWT, retourne None si invalide ou expire."""
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                options={
                    "require": ["exp", "sub"],
                    "verify_aud": self._audience is not None,
                },
            )
        except PyJWTError:
            return None
