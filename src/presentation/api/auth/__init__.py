"""
Auth - Verification des tokens JWT.

Les tokens sont emis par le fournisseur d'identite externe;
l'API se contente de les verifier (pas de login ici).
"""

from src.presentation.api.auth.jwt_service import JWTService, TokenPayload

__all__ = ["JWTService", "TokenPayload"]
