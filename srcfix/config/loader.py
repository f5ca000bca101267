from pathlib import Path

import yaml
from hotlog import get_logger
from pydantic import ValidationError

from srcfix.config.models import FixerSettings
from srcfix.exceptions import SettingsValidationError

logger = get_logger(__name__)


def load_settings(yaml_file: Path | None = None) -> FixerSettings:
    """Load fixer settings from a YAML file.

    Args:
        yaml_file: Path to the YAML settings file. None or an empty file yields
            the default prefixes.

    Returns:
        A validated FixerSettings instance.

    Raises:
        SettingsValidationError: If the file is not a mapping or holds invalid values
    """
    if yaml_file is None:
        return FixerSettings()

    settings_file = str(yaml_file)
    logger.debug('loading_settings', settings_file=settings_file)
    with yaml_file.open(encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as err:
            msg = f'Could not parse settings file {yaml_file}: {err}'
            raise SettingsValidationError(msg, settings_file=settings_file) from err

    if data is None:
        return FixerSettings()
    if not isinstance(data, dict):
        msg = f'Settings file {yaml_file} must contain a mapping'
        raise SettingsValidationError(msg, settings_file=settings_file)

    try:
        return FixerSettings.model_validate(data)
    except SettingsValidationError as err:
        # Raised from the model validator, which does not know the file
        err.log_fields.setdefault('settings_file', settings_file)
        raise
    except ValidationError as err:
        msg = f'Invalid settings in {yaml_file}: {err}'
        raise SettingsValidationError(msg, settings_file=settings_file) from err
