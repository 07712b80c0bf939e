"""Input/Output utilities.

The YAML loader used by ``configure_logging`` when handed a config path.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Union

def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load YAML configuration file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dictionary (empty for an empty file)
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    return config or {}
