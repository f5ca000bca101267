from srcfix.exceptions.core import SrcfixError, log_exception
from srcfix.exceptions.settings import SettingsError, SettingsValidationError

__all__ = [
    'SettingsError',
    'SettingsValidationError',
    'SrcfixError',
    'log_exception',
]
