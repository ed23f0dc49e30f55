"""
Tests unitaires pour la configuration structlog.
"""

from src.infrastructure.logging import configure_logging, get_logger
from src.infrastructure.logging.config import SENSITIVE_KEYS, _redact_sensitive


class TestRedactSensitive:
    """Tests pour le masquage des champs sensibles."""

    def test_sensitive_values_masked(self):
        event = {
            "event": "billing_requested",
            "authorization": "Bearer abc",
            "cpf": "12345678909",
            "user_id": "abc123",
        }

        result = _redact_sensitive(None, "info", event)

        assert result["authorization"] == "***"
        assert result["cpf"] == "***"
        assert result["user_id"] == "abc123"

    def test_known_keys(self):
        assert {"access_token", "api_token", "taxId"} <= SENSITIVE_KEYS


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_json_mode(self):
        """Mode production: le logger reste utilisable."""
        configure_logging(json_logs=True, log_level="DEBUG")
        logger = get_logger("tests")

        logger.info("billing_persisted", billing_id="bill_1")

    def test_console_mode(self):
        configure_logging(json_logs=False)
        assert get_logger("tests") is not None
