"""Tests for application and risk configuration."""

from src.config import Settings
from src.domains.booking_risk.config import RiskConfig


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.app_name == "booking-risk-engine"
        assert settings.app_version == "0.1.0"
        assert settings.log_format == "json"
        assert settings.max_batch_size == 500

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "test-app")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("MAX_BATCH_SIZE", "25")
        settings = Settings()
        assert settings.app_name == "test-app"
        assert settings.debug is True
        assert settings.max_batch_size == 25


class TestRiskConfig:
    def test_defaults(self):
        config = RiskConfig()
        assert config.scoring.severity_scores == {
            "low": 10,
            "medium": 25,
            "high": 40,
            "critical": 60,
        }
        assert config.scoring.critical_threshold == 95
        assert config.confidence.base == 0.70
        assert config.location.high_risk_ip_prefixes == ("10.0.", "192.168.", "127.0.")
        assert "mailinator.com" in config.behavior.disposable_email_domains

    def test_instances_do_not_share_state(self):
        first = RiskConfig()
        first.scoring.severity_scores["low"] = 99
        assert RiskConfig().scoring.severity_scores["low"] == 10

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("BOOKING_RISK_MAX_PREVIOUS_DECLINES", "5")
        monkeypatch.setenv("BOOKING_RISK_MARKET_RATIO_MAX", "2.5")
        monkeypatch.setenv("BOOKING_RISK_HIGH_RISK_IP_PREFIXES", "198.51.100., 203.0.113.")
        monkeypatch.setenv("BOOKING_RISK_DISPOSABLE_EMAIL_DOMAINS", "Burner.io,spam.dev")
        monkeypatch.setenv("BOOKING_RISK_CRITICAL_THRESHOLD", "90")

        config = RiskConfig.from_env()

        assert config.payment.max_previous_declines == 5
        assert config.pricing.market_ratio_max == 2.5
        assert config.location.high_risk_ip_prefixes == ("198.51.100.", "203.0.113.")
        assert config.behavior.disposable_email_domains == frozenset({"burner.io", "spam.dev"})
        assert config.scoring.critical_threshold == 90

    def test_from_env_without_overrides(self, monkeypatch):
        monkeypatch.delenv("BOOKING_RISK_MAX_PREVIOUS_DECLINES", raising=False)
        config = RiskConfig.from_env()
        assert config.payment.max_previous_declines == 2
