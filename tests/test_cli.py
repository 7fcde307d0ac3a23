import logging

import pytest

from chip8vm import InvalidInstructionError, cli


def test_parser_defaults():
    args = cli.build_parser().parse_args(["game.ch8"])
    assert args.rom == "game.ch8"
    assert args.scale == 10
    assert args.keymap == "cosmac"
    assert args.stack_depth == 16
    assert not args.show_fps
    assert args.verbose == 0


def test_parser_rejects_unknown_keymap():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["game.ch8", "--keymap", "dvorak"])


def test_bad_scale_is_a_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path / "x.ch8"), "--scale", "0"])
    assert exc.value.code == 2


def test_missing_rom_exits_before_opening_a_window(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="chip8vm"):
        code = cli.main([str(tmp_path / "missing.ch8")])
    assert code == 2
    assert "ROM not found" in caplog.text


def test_unreadable_rom(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="chip8vm"):
        code = cli.main([str(tmp_path)])
    assert code == 2
    assert "Could not load ROM" in caplog.text


def test_configure_logging_levels():
    cli.configure_logging(0)
    assert logging.getLogger("chip8vm").level == logging.WARNING
    cli.configure_logging(2)
    assert logging.getLogger("chip8vm").level == logging.DEBUG
    cli.configure_logging(0)


class StubWindow:
    def __init__(self, error=None):
        self.error = error


def test_emulation_error_exits_1_and_logs(tmp_path, monkeypatch, caplog):
    rom = tmp_path / "bad.ch8"
    rom.write_bytes(b"\xF0\xFF")
    monkeypatch.setattr(cli, "run_window",
                        lambda vm, args: StubWindow(InvalidInstructionError(0xF0FF, 0x200)))
    with caplog.at_level(logging.ERROR, logger="chip8vm"):
        code = cli.main([str(rom)])
    assert code == 1
    assert any(r.levelno == logging.ERROR and "F0FF" in r.getMessage() for r in caplog.records)


def test_clean_close_exits_0(tmp_path, monkeypatch):
    rom = tmp_path / "ok.ch8"
    rom.write_bytes(b"\x12\x00")
    monkeypatch.setattr(cli, "run_window", lambda vm, args: StubWindow())
    assert cli.main([str(rom)]) == 0
