import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_tree.yml"

DEFAULT_LAYOUT = {
    "horizontal_spacing": 180.0,
    "vertical_spacing": 120.0,
    "refinement_passes": 3,
    "retain_weight": 0.3,
}

# Rough birth-year heuristic for individuals unreachable from any root.
DEFAULT_GENERATIONS = {
    "base_year": 1000,
    "years_per_generation": 30,
}


class TreeConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.layout = {**DEFAULT_LAYOUT, **(data.get("layout") or {})}
        self.generations = {**DEFAULT_GENERATIONS, **(data.get("generations") or {})}
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)


def load_config(path=None) -> 'TreeConfig':
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return TreeConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return TreeConfig(data)

_config_cache = None

def get_config() -> 'TreeConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
