import pytest

from chip8.config import EmulatorConfig, parse_args


def test_positionals_follow_scale_delay_rom():
    cfg = parse_args(["12", "3", "pong.ch8"])
    assert cfg == EmulatorConfig(rom_path="pong.ch8", scale=12, cycle_delay=3, debug=False)


def test_debug_flag():
    assert parse_args(["1", "0", "x.ch8", "--debug"]).debug is True


@pytest.mark.parametrize("argv", [["0", "1", "x.ch8"], ["2", "-1", "x.ch8"], ["2", "1"]])
def test_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_leading_zeros_are_decimal():
    cfg = parse_args(["010", "02", "x.ch8"])
    assert (cfg.scale, cfg.cycle_delay) == (10, 2)
