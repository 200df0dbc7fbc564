"""Configuration management."""

import json
import yaml
from pathlib import Path
from typing import Dict, Any


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            return yaml.safe_load(f) or {}
        elif path.suffix.lower() == '.json':
            return json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'analytics': {
            'top_n': 10,
            'content_preview_chars': 100,
            'daily_average_window_days': 30,
        },
        'velocity': {
            'max_hours': 720,  # 30 days
        },
        'scoring': {
            'streak_points_per_day': 3,
            'streak_max': 30,
            'daily_average_points_per_task': 4,
            'daily_average_max': 30,
            'consistency_window_days': 30,
            'consistency_max': 20,
            'velocity_max': 20,
            'velocity_cutoff_hours': 48,
        },
        'leveling': {
            'base_xp': 10,
            'xp_multiplier': 1.2,
        },
        'trends': {
            'days': 12,
            'weeks': 12,
            'months': 12,
            'heatmap_days': 364,
        },
        'logbook': {
            'minutes_per_task': 2,
            'targets': {'day': 10, 'week': 50, 'month': 200},
        },
        'generator': {
            'count': 200,
            'history_days': 90,
            'open_count': 40,
        },
        'logging': {
            'level': 'INFO',
            'format': 'dev',
        },
    }
