import json
from pathlib import Path

import pytest

import lom.main
from lom.main import build_parser, main
from lom.services.factories import CharacterLoadout


def test_main_runs_walkthrough_with_bundled_config(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--seed", "7"]) == 0

    output = capsys.readouterr().out
    assert "Land of Mist Balance Walkthrough" in output
    assert "--- Combat ---" in output
    assert "Spell: Firebolt" in output
    assert "Level 5 Experience Required: 207" in output
    assert "Buy Price: 25s 0c" in output
    assert "--- Difficulty Profiles ---" in output


def test_main_hard_difficulty(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--difficulty", "hard", "--seed", "1"]) == 0
    assert "Current Difficulty: hard" in capsys.readouterr().out


def test_main_rejects_config_with_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "balance.json"
    config_path.write_text(json.dumps({"economy": {"shop_sell_price_multiplier": 2.0}}), encoding="utf-8")

    assert main(["--config", str(config_path)]) == 1
    assert "[ERROR] SELL_EXCEEDS_BUY" in capsys.readouterr().out


def test_main_reports_unreadable_config(tmp_path: Path) -> None:
    config_path = tmp_path / "balance.json"
    config_path.write_text(json.dumps({"combat": {"crit": 0.5}}), encoding="utf-8")

    assert main(["--config", str(config_path)]) == 1
    assert main(["--config", str(tmp_path / "missing.json")]) == 1


def test_parser_rejects_unknown_difficulty() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--difficulty", "nightmare"])


def test_main_reports_missing_starting_weapon(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lom.main, "create_character_loadout", lambda *args: CharacterLoadout())

    assert main([]) == 1
