"""Tests for ``python -m segtrie``."""

from pathlib import PurePath

import pytest

from segtrie import storage
from segtrie.__main__ import main


@pytest.fixture
def rules(isolated_config):
    f = isolated_config / "rules.txt"
    f.write_text(
        "/etc/bin/echos usr/cat\n"
        "/etc/bin/echo/hello.txt usr/tar\n",
        encoding="utf-8",
    )
    return f


def test_resolve(rules, capsys):
    assert main(["-r", str(rules), "/etc/bin/echo/hello.txt/jello"]) == 0
    out = capsys.readouterr().out
    assert out == f"/etc/bin/echo/hello.txt/jello\t{PurePath('usr/tar/jello')}\n"


def test_unmatched_path_fails(rules, capsys, log_messages):
    assert main(["-r", str(rules), "/etc/bin/echos", "/etc/bin/echo"]) == 1
    assert "/etc/bin/echos\t" in capsys.readouterr().out
    assert "/etc/bin/echo matches no rule" in log_messages


def test_contains(rules, capsys):
    assert main(["-r", str(rules), "-c", "--sorted", "/etc/bin/echos", "/etc/bin/echo"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["/etc/bin/echos\tTrue", "/etc/bin/echo\tFalse"]


def test_missing_rule_file(isolated_config, log_messages):
    assert main(["-r", "absent.rules", "/x"]) == 2
    assert log_messages == ["rule file absent.rules not found"]


def test_bad_rule_file(isolated_config, log_messages):
    (isolated_config / "bad.rules").write_text("one two three\n", encoding="utf-8")
    assert main(["-r", "bad.rules", "/x"]) == 2
    assert any("bad.rules:1" in m for m in log_messages)


def test_set_config_then_default_rules(rules, capsys):
    assert main(["--set-config", "-r", str(rules)]) == 0
    assert storage.global_config()["rules"] == str(rules)
    assert main(["/etc/bin/echos/x"]) == 0
    assert f"\t{PurePath('usr/cat/x')}" in capsys.readouterr().out


def test_reset(rules):
    cfg = storage.local_config()
    cfg["rules"] = "other"
    cfg.dump()
    assert main(["--reset"]) == 0
    assert "rules" not in dict(storage.local_config())


def test_sorted_can_be_switched_back_off(isolated_config):
    assert main(["--set-config", "--sorted"]) == 0
    assert storage.global_config()["sorted"] is True
    assert main(["--set-config"]) == 0
    assert storage.global_config()["sorted"] is True
    assert main(["--set-config", "--no-sorted"]) == 0
    assert storage.global_config()["sorted"] is False


def test_level_is_normalized(isolated_config):
    assert main(["--set-config", "--level", "debug"]) == 0
    assert storage.global_config()["level"] == "DEBUG"
    assert main(["--set-config", "--level", "info"]) == 0


def test_invalid_level_is_rejected(isolated_config, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--set-config", "--level", "bogus"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
    assert "level" not in dict(storage.global_config())


def test_stale_level_in_config_is_reported(rules, log_messages):
    gcfg = storage.global_config()
    gcfg["level"] = "bogus"
    gcfg.dump()
    assert main(["-r", str(rules), "/etc/bin/echos"]) == 0
    assert any("unknown log level 'bogus'" in m for m in log_messages)
