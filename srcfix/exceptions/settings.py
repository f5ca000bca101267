from srcfix.exceptions.core import SrcfixError


class SettingsError(SrcfixError):
    """Base class for settings-related errors."""

    log_category = 'settings_error'


class SettingsValidationError(SettingsError):
    """Settings file could not be parsed or holds invalid prefixes."""

    log_category = 'settings_validation_failed'
