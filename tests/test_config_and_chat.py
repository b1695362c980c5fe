"""Yapılandırma ve sohbet komutları testleri."""

import os
from unittest.mock import MagicMock

import pytest

from stock_insight.catalog import InventoryCatalog
from stock_insight.chat import handle_command, process_turn, render_dashboard
from stock_insight.config import DEFAULT_MODEL_ID, load_settings
from stock_insight.data.sample_products import sample_products


class TestSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        for name in ("AWS_DEFAULT_REGION", "STOCK_INSIGHT_MODEL_ID",
                     "STOCK_INSIGHT_MAX_TOKENS", "STOCK_INSIGHT_TEMPERATURE"):
            monkeypatch.delenv(name, raising=False)
        settings = load_settings(tmp_path / "missing.env")
        assert settings.region_name == "us-west-2"
        assert settings.model_id == DEFAULT_MODEL_ID
        assert settings.max_tokens == 1000

    def test_env_file_values(self, monkeypatch, tmp_path):
        monkeypatch.delenv("STOCK_INSIGHT_MAX_TOKENS", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("STOCK_INSIGHT_MAX_TOKENS=256\n")
        try:
            settings = load_settings(env_file)
        finally:
            os.environ.pop("STOCK_INSIGHT_MAX_TOKENS", None)
        assert settings.max_tokens == 256

    def test_environment_overrides_env_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOCK_INSIGHT_TEMPERATURE", "0.2")
        env_file = tmp_path / ".env"
        env_file.write_text("STOCK_INSIGHT_TEMPERATURE=0.9\n")
        assert load_settings(env_file).temperature == 0.2

    def test_malformed_number_raises(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOCK_INSIGHT_MAX_TOKENS", "lots")
        with pytest.raises(ValueError, match="STOCK_INSIGHT_MAX_TOKENS"):
            load_settings(tmp_path / "missing.env")


class TestChatCommands:
    def _catalog(self) -> InventoryCatalog:
        return InventoryCatalog(sample_products())

    def test_dashboard(self):
        text = render_dashboard(self._catalog())
        assert "Total SKUs: 6" in text
        assert "Critical: 1 SKUs" in text

    def test_eoq_command(self):
        result = handle_command("eoq elec-lap-15", self._catalog(), MagicMock())
        assert result.startswith("ELEC-LAP-15 EOQ:")

    def test_eoq_unknown_sku(self):
        assert handle_command("eoq NOPE", self._catalog(), MagicMock()) == "SKU not found: NOPE"

    def test_eoq_without_sku(self):
        assert handle_command("eoq", self._catalog(), MagicMock()) == "Usage: eoq <SKU>"

    def test_optimize_delegates_to_agent(self):
        agent = MagicMock()
        agent.optimize_product.return_value = "plan"
        assert handle_command("optimize FURN-CHR-ERG", self._catalog(), agent) == "plan"
        assert agent.optimize_product.call_args.args[0].sku == "FURN-CHR-ERG"

    def test_abc_lists_every_sku(self):
        text = handle_command("abc", self._catalog(), MagicMock())
        assert len(text.splitlines()) == 6

    def test_free_text_is_not_a_command(self):
        assert handle_command("what should I reorder?", self._catalog(), MagicMock()) is None


class TestProcessTurn:
    """Bir turdaki hata sohbet döngüsünü sonlandırmaz."""

    def test_command_error_is_reported(self):
        agent = MagicMock()
        agent.optimize_product.side_effect = RuntimeError("model offline")
        catalog = InventoryCatalog(sample_products())
        session = MagicMock()
        assert process_turn("optimize FURN-CHR-ERG", catalog, agent, session) == "Error: model offline"

    def test_ask_error_is_reported(self):
        session = MagicMock()
        session.ask.side_effect = RuntimeError("boom")
        result = process_turn("what is low?", InventoryCatalog(sample_products()), MagicMock(), session)
        assert result == "Error: boom"

    def test_free_text_goes_to_session(self):
        session = MagicMock()
        session.ask.return_value = "Reorder chairs."
        result = process_turn("what is low?", InventoryCatalog(sample_products()), MagicMock(), session)
        assert result == "AI: Reorder chairs."
        session.ask.assert_called_once_with("what is low?")
