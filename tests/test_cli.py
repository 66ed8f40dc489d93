import pytest

from chaosgame.cli import parse_args


def test_defaults():
    args = parse_args([])
    assert args.preset == "sierpinski"
    assert args.load is None
    assert args.config is None
    assert args.iterations is None
    assert args.export is None


def test_preset_is_case_insensitive():
    assert parse_args(["--preset", "Julia"]).preset == "julia"


def test_unknown_preset():
    with pytest.raises(SystemExit):
        parse_args(["--preset", "mandelbrot"])


def test_load_and_preset_are_exclusive():
    with pytest.raises(SystemExit):
        parse_args(["--load", "fern.txt", "--preset", "barnsley"])


def test_headless_export_options():
    args = parse_args(["--load", "fern.txt", "--iterations", "5000", "--seed", "3", "--export", "fern.png"])
    assert args.load == "fern.txt"
    assert args.iterations == 5000
    assert args.seed == 3
    assert args.export == "fern.png"
