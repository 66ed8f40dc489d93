import argparse

from chaosgame.presets import AVAILABLE_PRESETS


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Draws fractals with the chaos game.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--load", type=str, metavar="PATH", help="Path to a description file.", default=None
    )
    source.add_argument(
        "--preset", type=str.lower, choices=sorted(AVAILABLE_PRESETS), help="Built-in description.", default="sierpinski"
    )
    parser.add_argument(
        "--config", type=str, metavar="PATH", help="Path to a YAML settings file.", default=None
    )
    parser.add_argument(
        "--iterations", type=int, metavar="N", help="Number of iterations, overrides the settings file.", default=None
    )
    parser.add_argument(
        "--seed", type=int, help="Seed for the random transform choice, overrides the settings file.", default=None
    )
    parser.add_argument(
        "--export", type=str, metavar="PATH", help="Render to a PNG file without opening the window.", default=None
    )
    return parser.parse_args(argv)
