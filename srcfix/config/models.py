from pydantic import BaseModel, ConfigDict, Field, model_validator

from srcfix.exceptions import SettingsValidationError

LEGACY_PREFIX = '/Volumes/google/src'
CANONICAL_PREFIX = '/google/src'
MOUNT_MARKER = '/Volumes'


class FixerSettings(BaseModel):
    """Prefixes used when rewriting paths from the symlinked volume mount."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    legacy_prefix: str = Field(
        default=LEGACY_PREFIX,
        description='Prefix reported by canonical paths on the affected platform.',
    )
    canonical_prefix: str = Field(
        default=CANONICAL_PREFIX,
        description='Prefix used for the same location on every other platform.',
    )
    mount_marker: str = Field(
        default=MOUNT_MARKER,
        description='Top-level directory under which external volumes are mounted.',
    )

    @model_validator(mode='after')
    def validate_prefixes(self) -> 'FixerSettings':
        """Ensure prefixes are absolute and agree with each other."""
        for name in ('legacy_prefix', 'canonical_prefix', 'mount_marker'):
            value = getattr(self, name)
            if not value.startswith('/') or value == '/':
                msg = f'{name} must be an absolute path below the root: {value!r}'
                raise SettingsValidationError(msg)
            if value.endswith('/'):
                msg = f'{name} must not end with a slash: {value!r}'
                raise SettingsValidationError(msg)
        if not self.legacy_prefix.startswith(self.mount_marker):
            msg = f'legacy_prefix {self.legacy_prefix!r} must start with mount_marker {self.mount_marker!r}'
            raise SettingsValidationError(msg)
        # Stripping the marker from the legacy prefix has to give the canonical prefix,
        # otherwise text rewrites and file rewrites disagree on the same path.
        expected = self.legacy_prefix[len(self.mount_marker) :]
        if self.canonical_prefix != expected:
            msg = (
                f'canonical_prefix {self.canonical_prefix!r} must equal legacy_prefix without '
                f'mount_marker ({expected!r})'
            )
            raise SettingsValidationError(msg)
        return self
