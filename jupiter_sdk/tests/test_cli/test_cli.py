"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from jupiter_sdk.cli import main
from jupiter_sdk.models.common import JUP_MINT, SOL_MINT

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_config_show_masks_api_key(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.setenv("JUPITER_API_KEY", "secret-key")
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "secret-key" not in captured.out
        assert "***" in captured.out
        assert "lite-api.jup.ag" in captured.out

    def test_config_get(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "config", "get", "swap.slippage_bps"])
        assert result == 0
        assert capsys.readouterr().out.strip() == "100"

    def test_config_get_unknown_key(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "config", "get", "swap.nope"])
        assert result == 1
        assert "Error" in capsys.readouterr().out

    def test_bad_config_file_returns_1(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("- not\n- a mapping\n")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 1
        assert "Invalid config" in capsys.readouterr().out

    def test_unknown_config_key_returns_1(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("client:\n  base_uri: https://api.jup.ag\n")
        result = main(["--config", str(config_path), "routers"])
        assert result == 1
        assert "Invalid config" in capsys.readouterr().out

    @respx.mock
    def test_quote_uses_config_defaults(self, config_yaml_path: Path, capsys):
        with open(FIXTURE_DIR / "quote_response.json") as f:
            quote_fixture = json.load(f)
        route = respx.get("https://api.jup.ag/swap/v1/quote").mock(
            return_value=httpx.Response(200, json=quote_fixture)
        )

        result = main([
            "--config", str(config_yaml_path),
            "quote", "--input-mint", "SOL", "--output-mint", "JUP", "--amount", "1000000000",
        ])

        assert result == 0
        params = route.calls.last.request.url.params
        assert params["inputMint"] == SOL_MINT
        assert params["outputMint"] == JUP_MINT
        assert params["slippageBps"] == "100"
        assert params["swapMode"] == "ExactIn"
        out = json.loads(capsys.readouterr().out)
        assert out["outAmount"] == "352384701"

    @respx.mock
    def test_routers(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        respx.get("https://lite-api.jup.ag/ultra/v1/order/routers").mock(
            return_value=httpx.Response(200, json=[{"id": "metis", "name": "Metis v1.6"}])
        )
        result = main(["--config", str(config_path), "routers"])
        assert result == 0
        assert "metis" in capsys.readouterr().out

    @respx.mock
    def test_api_error_returns_1(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        respx.get("https://lite-api.jup.ag/ultra/v1/order/routers").mock(
            return_value=httpx.Response(503, text="unavailable")
        )
        result = main(["--config", str(config_path), "routers"])
        assert result == 1
        assert "503" in capsys.readouterr().out

    def test_trigger_orders_needs_wallet(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "trigger-orders"])
        assert result == 1
        assert "wallet" in capsys.readouterr().out

    @respx.mock
    def test_trigger_orders(self, config_yaml_path: Path, capsys):
        with open(FIXTURE_DIR / "trigger_orders_response.json") as f:
            orders_fixture = json.load(f)
        respx.get("https://api.jup.ag/trigger/v1/getTriggerOrders").mock(
            return_value=httpx.Response(200, json=orders_fixture)
        )
        result = main(["--config", str(config_yaml_path), "trigger-orders", "--history"])
        assert result == 0
        out = capsys.readouterr().out
        assert "Page 1/1 | Orders: 1" in out
        assert "[Completed]" in out
