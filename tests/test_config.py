"""
Unit Tests for Configuration Loading
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError
from extended_warranty.config import ExtendedWarrantyConfig, MCPServerConfig, WarrantyRulesConfig


class TestConfig:

    def test_defaults(self, monkeypatch):
        for var in ("WARRANTY_PRICE_THRESHOLD", "WARRANTY_HIGH_TIER_DAYS", "WARRANTY_SALES_URL", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        cfg = ExtendedWarrantyConfig.from_env()

        assert cfg.rules.price_threshold == Decimal("500000")
        assert cfg.rules.high_tier_percentage == Decimal("0.20")
        assert cfg.rules.low_tier_percentage == Decimal("0.10")
        assert cfg.rules.high_tier_days == 200
        assert cfg.rules.low_tier_days == 100
        assert cfg.log_level == "INFO"

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("WARRANTY_PRICE_THRESHOLD", "300000")
        monkeypatch.setenv("WARRANTY_HIGH_TIER_DAYS", "150")
        monkeypatch.setenv("WARRANTY_SALES_PORT", "9100")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        cfg = ExtendedWarrantyConfig.from_env()

        assert cfg.rules.price_threshold == Decimal("300000")
        assert cfg.rules.high_tier_days == 150
        assert cfg.server.port == 9100
        assert cfg.log_level == "DEBUG"

    def test_invalid_days_rejected(self):
        with pytest.raises(ValidationError):
            WarrantyRulesConfig(high_tier_days=0)

    def test_server_url(self):
        assert MCPServerConfig(port=8004).get_url() == "http://127.0.0.1:8004/mcp"
        assert MCPServerConfig(url="https://example.com/mcp").get_url() == "https://example.com/mcp"
