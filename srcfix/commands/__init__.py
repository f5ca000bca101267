from .fix import file_command, resolve_command, text_command

__all__ = ['file_command', 'resolve_command', 'text_command']
