"""
Calculator settings.

Settings can be loaded from a YAML file:

```yaml
history_key: "calc.history"
memory_key: "calc.memory"
mode_key: "calc.mode"
persisted_history_limit: 20
display_history_limit: 5
```
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from pocketcalc.exceptions import ConfigurationError
from pocketcalc.history import DISPLAY_HISTORY_LIMIT, PERSISTED_HISTORY_LIMIT


class CalculatorSettings(BaseModel):
    """Storage keys and history windows."""

    history_key: str = Field(default="calc.history", min_length=1)
    memory_key: str = Field(default="calc.memory", min_length=1)
    mode_key: str = Field(default="calc.mode", min_length=1)
    persisted_history_limit: int = Field(default=PERSISTED_HISTORY_LIMIT, ge=1)
    display_history_limit: int = Field(default=DISPLAY_HISTORY_LIMIT, ge=1)


def load_settings(config_path: Path | None = None) -> CalculatorSettings:
    """
    Load settings from a YAML file, or return the defaults.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML or
            fails validation
    """
    if config_path is None:
        return CalculatorSettings()

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError("Configuration file not found", config_path)

    with open(config_path) as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e

    if raw_config is None:
        return CalculatorSettings()
    if not isinstance(raw_config, dict):
        raise ConfigurationError("Configuration must be a mapping", config_path)

    try:
        return CalculatorSettings(**raw_config)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed:\n{e}") from e
