"""Loading of process-wide sluggable settings."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from sluggable.constants import DEFAULT_SETTINGS_PATH
from sluggable.models.config import SluggableSettings
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)


def load_settings(file_path: Path | str = DEFAULT_SETTINGS_PATH) -> SluggableSettings:
    """
    Load slug defaults and logging settings from a YAML file.

    An empty file yields the built-in defaults.

    Raises:
        FileNotFoundError: If the file is missing
        ValidationError: If an option has the wrong type
        yaml.YAMLError: If the YAML cannot be parsed

    Examples:
        >>> load_settings("config/sluggable.yaml").defaults.separator
        '-'
    """
    path = Path(file_path)

    if not path.exists():
        logger.error("Settings file missing", path=str(path))
        raise FileNotFoundError(f"Settings file missing: {path}")

    try:
        with path.open("r") as f:
            raw = yaml.safe_load(f) or {}

        settings = SluggableSettings.model_validate(raw)

    except yaml.YAMLError as e:
        logger.error("Invalid YAML syntax", path=str(path), error=str(e))
        raise

    except ValidationError as e:
        logger.error("Settings do not match schema", path=str(path), error=str(e))
        raise

    logger.info("Settings loaded", path=str(path))
    return settings
