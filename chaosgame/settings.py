import logging
from dataclasses import dataclass

import yaml


@dataclass
class AppSettings:
    resolution: tuple  # canvas width, height in pixels
    iterations: int
    steps_per_tick: int
    tick_interval: int  # milliseconds between animation ticks
    colormap: str
    seed: int | None
    descriptions_dir: str
    export_dir: str


default_settings = AppSettings(
    resolution=(800, 600),
    iterations=100000,
    steps_per_tick=5000,
    tick_interval=16,
    colormap="inferno",
    seed=None,
    descriptions_dir="./descriptions",
    export_dir="./exports",
)


def settings_to_dict(settings):
    """Convert AppSettings to a dictionary for YAML serialization."""
    return {
        "canvas": {
            "resolution": {
                "width": settings.resolution[0],
                "height": settings.resolution[1],
            },
        },
        "computation": {
            "iterations": settings.iterations,
            "seed": settings.seed,
            "animation": {
                "steps_per_tick": settings.steps_per_tick,
                "tick_interval": settings.tick_interval,
            },
        },
        "presentation": {
            "colormap": settings.colormap,
        },
        "paths": {
            "descriptions": settings.descriptions_dir,
            "exports": settings.export_dir,
        },
    }


def dict_to_settings(settings_dict):
    """Convert a dictionary to an AppSettings object. Missing keys keep their defaults."""
    canvas = settings_dict.get("canvas", {})
    resolution = canvas.get("resolution", {})
    computation = settings_dict.get("computation", {})
    animation = computation.get("animation", {})
    presentation = settings_dict.get("presentation", {})
    paths = settings_dict.get("paths", {})

    settings = AppSettings(
        resolution=(
            int(resolution.get("width", default_settings.resolution[0])),
            int(resolution.get("height", default_settings.resolution[1])),
        ),
        iterations=int(computation.get("iterations", default_settings.iterations)),
        steps_per_tick=int(animation.get("steps_per_tick", default_settings.steps_per_tick)),
        tick_interval=int(animation.get("tick_interval", default_settings.tick_interval)),
        colormap=presentation.get("colormap", default_settings.colormap),
        seed=computation.get("seed", default_settings.seed),
        descriptions_dir=paths.get("descriptions", default_settings.descriptions_dir),
        export_dir=paths.get("exports", default_settings.export_dir),
    )
    if settings.resolution[0] <= 0 or settings.resolution[1] <= 0:
        raise ValueError(f"Resolution must be positive, got {settings.resolution}")
    if settings.steps_per_tick <= 0:
        raise ValueError(f"steps_per_tick must be positive, got {settings.steps_per_tick}")
    return settings


def load_settings(path):
    with open(path, "r") as file:
        settings_dict = yaml.safe_load(file) or {}
    logging.info(f"Settings loaded from {path}")
    return dict_to_settings(settings_dict)


def save_settings(settings, path):
    with open(path, "w") as file:
        yaml.dump(settings_to_dict(settings), file, default_flow_style=False)
    logging.info(f"Settings saved to {path}")
