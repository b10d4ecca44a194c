import json

import yaml
from pydantic import ValidationError

from typer.testing import CliRunner

from mpower import cli
from mpower.config.settings import Settings
from mpower.gateway import setup as gateway_setup

runner = CliRunner()


def _quiet(monkeypatch):
    for name in ("log_system", "log_gateway", "log_error"):
        monkeypatch.setattr(cli, name, lambda *a, **kw: None)


def test_preview_prints_payload(monkeypatch, tmp_path):
    _quiet(monkeypatch)
    p = tmp_path / "invoice.yaml"
    p.write_text(
        "store: {name: S}\ndescription: d\nitems: [{name: Phone, unit_price: 50, description: desc}]\n"
        "taxes: [{name: VAT, amount: 30}]\n",
        encoding="utf-8",
    )
    result = runner.invoke(cli.app, ["preview", str(p), "--compact"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["invoice"]["items"]["item_0"]["name"] == "Phone"
    assert payload["invoice"]["taxes"]["tax_0"]["amount"] == 30.0
    assert payload["invoice"]["total_amount"] == 80.0


def test_preview_rejects_empty_invoice(monkeypatch, tmp_path):
    _quiet(monkeypatch)
    p = tmp_path / "invoice.yaml"
    p.write_text("store: {name: S}\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["preview", str(p)])
    assert result.exit_code == 1


def test_config_status_hides_values(monkeypatch):
    fake = Settings(
        mpower_master_key="supersecret",
        mpower_private_key=None,
        mpower_public_key=None,
        mpower_token=None,
        mpower_mode="test",
    )
    monkeypatch.setattr(gateway_setup, "default_settings", fake)
    result = runner.invoke(cli.app, ["config-status"])
    assert result.exit_code == 0
    assert "supersecret" not in result.output
    assert "✓ Master key" in result.output
    assert "✗ Token" in result.output


def test_config_status_rejects_unknown_mode(monkeypatch):
    monkeypatch.setattr(cli, "log_error", lambda *a, **kw: None)
    # model_construct skips validation so the bad mode reaches Setup
    fake = Settings.model_construct(
        mpower_master_key=None,
        mpower_private_key=None,
        mpower_public_key=None,
        mpower_token=None,
        mpower_mode="sandbox",
        log_dir="logs",
    )
    monkeypatch.setattr(gateway_setup, "default_settings", fake)
    result = runner.invoke(cli.app, ["config-status"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValidationError)


def test_preview_rejects_malformed_yaml(monkeypatch, tmp_path):
    _quiet(monkeypatch)
    p = tmp_path / "invoice.yaml"
    p.write_text("store: {name: S\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["preview", str(p)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, yaml.YAMLError)


def test_preview_rejects_list_document(monkeypatch, tmp_path):
    _quiet(monkeypatch)
    p = tmp_path / "invoice.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["preview", str(p)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, TypeError)
