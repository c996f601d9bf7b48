import pytest

from fruitsnake.main import parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.seed is None
    assert args.tick_ms == 200
    assert not args.avoid_snake
    assert args.log_level == "INFO"


def test_parse_args_overrides():
    args = parse_args(["--seed", "7", "--tick-ms", "120", "--avoid-snake", "--log-level", "DEBUG"])
    assert (args.seed, args.tick_ms, args.avoid_snake, args.log_level) == (7, 120, True, "DEBUG")


@pytest.mark.parametrize("bad", ["0", "-5", "fast"])
def test_parse_args_rejects_non_positive_tick(bad, capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--tick-ms", bad])
    assert exc.value.code == 2
    assert "--tick-ms" in capsys.readouterr().err
