import json
from pathlib import Path

import pytest

pytest.importorskip("typer")

from typer.testing import CliRunner

from shamir_disclosure.cli.main import app
from shamir_disclosure.field import PRIME
from shamir_disclosure.version import __version__

runner = CliRunner()

_SECRET = 987654321987654321
_COEFF = 55555


def _write_document(directory: Path, payload: dict) -> Path:
    path = directory / "shards.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _log_records(stderr: str) -> list[dict]:
    records = []
    for line in stderr.splitlines():
        line = line.strip()
        if line.startswith("{"):
            records.append(json.loads(line))
    return records


def test_version(isolated_config: Path) -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"shamir-disclosure {__version__}"


def test_modulus_formats(isolated_config: Path) -> None:
    decimal = runner.invoke(app, ["modulus"])
    assert decimal.exit_code == 0
    assert decimal.stdout.strip() == str(PRIME)

    hexadecimal = runner.invoke(app, ["modulus", "--format", "hex"])
    assert hexadecimal.exit_code == 0
    assert hexadecimal.stdout.strip() == "0x30644e72e131a029b85045b68181585d2833e84879b9709143e1f593f0000001"


def test_reconstruct_stdout_is_a_single_json_document(isolated_config: Path) -> None:
    path = _write_document(
        isolated_config,
        {
            "recipient_amount": 3,
            "threshold_amount": 2,
            "shards": [{"x": 1, "y": "1325"}, {"shard_x": "3", "shard_y": "1507"}],
        },
    )
    result = runner.invoke(app, ["reconstruct", str(path)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"secret": "1234"}


def test_reconstruct_hex_output(isolated_config: Path) -> None:
    path = _write_document(isolated_config, {"shards": [{"x": 1, "y": 1325}, {"x": 3, "y": 1507}]})
    result = runner.invoke(
        app, ["reconstruct", str(path), "--recipients", "3", "--threshold", "2", "--format", "hex"]
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"secret": "0x" + format(1234, "064x")}


def test_reconstruct_logs_events_to_stderr(isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHAMIR_LOG_LEVEL", "debug")
    path = _write_document(
        isolated_config,
        {
            "recipient_amount": 3,
            "threshold_amount": 2,
            "shards": [{"x": 2, "y": _SECRET + 2 * _COEFF}, {"x": 3, "y": _SECRET + 3 * _COEFF}],
        },
    )
    result = runner.invoke(app, ["reconstruct", str(path)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"secret": str(_SECRET)}

    records = _log_records(result.stderr)
    assert [record["msg"] for record in records] == ["shards.loaded", "secret.reconstructed"]
    assert records[0]["count"] == 2
    assert records[1]["threshold"] == 2
    assert all(record["component"] == "shamir_disclosure.cli" for record in records)
    assert str(_SECRET) not in result.stderr
    assert format(_SECRET, "x") not in result.stderr


def test_reconstruct_failure_is_logged(isolated_config: Path) -> None:
    path = _write_document(
        isolated_config,
        {"recipient_amount": 3, "threshold_amount": 2, "shards": [{"x": 1, "y": 10}, {"x": 1, "y": 20}]},
    )
    result = runner.invoke(app, ["reconstruct", str(path)])
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Duplicate shard x-coordinate detected: 1." in result.stderr
    failures = [record for record in _log_records(result.stderr) if record["msg"] == "reconstruct.failed"]
    assert failures and failures[0]["error"] == "DuplicateShardError"
    assert failures[0]["level"] == "error"


def test_error_level_silences_info_events(isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHAMIR_LOG_LEVEL", "error")
    path = _write_document(
        isolated_config,
        {"recipient_amount": 3, "threshold_amount": 2, "shards": [{"x": 1, "y": 1325}, {"x": 3, "y": 1507}]},
    )
    result = runner.invoke(app, ["reconstruct", str(path)])
    assert result.exit_code == 0, result.output
    assert _log_records(result.stderr) == []


def test_config_file_sets_output_format(isolated_config: Path) -> None:
    config = isolated_config / "config.yaml"
    config.write_text("output:\n  format: hex\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(config), "modulus"])
    assert result.exit_code == 0
    assert result.stdout.strip().startswith("0x30644e72")


def test_cli_options_override_document_amounts(isolated_config: Path) -> None:
    path = _write_document(
        isolated_config,
        {
            "recipient_amount": 3,
            "threshold_amount": 3,
            "shards": [{"x": 1, "y": 1325}, {"x": 3, "y": 1507}],
        },
    )
    result = runner.invoke(app, ["reconstruct", str(path), "-t", "2"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"secret": "1234"}


def test_missing_amounts_exit_code(isolated_config: Path) -> None:
    path = _write_document(isolated_config, {"shards": [{"x": 1, "y": 1}]})
    result = runner.invoke(app, ["reconstruct", str(path)])
    assert result.exit_code == 2
    assert "threshold_amount" in result.stderr


def test_bad_document_is_reported(isolated_config: Path) -> None:
    path = isolated_config / "broken.json"
    path.write_text("{", encoding="utf-8")
    result = runner.invoke(app, ["reconstruct", str(path)])
    assert result.exit_code == 1
    assert "Malformed shard document" in result.stderr


def test_invalid_config_exits(isolated_config: Path) -> None:
    config = isolated_config / "config.yaml"
    config.write_text("output:\n  format: base64\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(config), "version"])
    assert result.exit_code == 2


def test_config_init_writes_defaults(isolated_config: Path) -> None:
    target = isolated_config / "out" / "config.yaml"
    result = runner.invoke(app, ["config-init", "--destination", str(target)])
    assert result.exit_code == 0
    assert target.is_file()
    assert "format: decimal" in target.read_text(encoding="utf-8")
