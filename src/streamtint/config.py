"""Configuration management for streamtint.

This module loads user configuration from ~/.config/streamtint/init.py,
executing it in a sandbox where it can only set values on a ``config``
object.
"""

from __future__ import annotations

import os
import traceback
from pathlib import Path
from typing import Any, Optional


class StreamTintConfig:
    """Configuration container for streamtint settings.

    All settings have sensible defaults; init.py only needs to set what it
    wants to change.
    """

    def __init__(self):
        # Style overrides, keyed by format name ("keyword", "number", ...)
        self.styles: dict[str, str] = {}
        # Replaces the bracket color cycle when non-empty
        self.bracket_styles: list[str] = []

        # Characters read per chunk by the command line tool
        self.chunk_size: int = 64
        # Maximum widget redraws per second while streaming
        self.max_fps: float = 30.0
        self.color: bool = True

        # Custom settings (user can add any additional settings)
        self._custom: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        """Set a custom configuration value."""
        self._custom[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get a custom configuration value."""
        return self._custom.get(key, default)


def get_config_path() -> Path:
    """Get the path to the user's config directory."""
    config_home = os.environ.get('XDG_CONFIG_HOME')
    if config_home:
        return Path(config_home) / 'streamtint'
    return Path.home() / '.config' / 'streamtint'


def get_init_script_path() -> Path:
    """Get the path to the user's init.py script."""
    return get_config_path() / 'init.py'


def load_config(path: Optional[Path] = None) -> tuple[StreamTintConfig, Optional[str]]:
    """Load configuration from *path*, or ~/.config/streamtint/init.py.

    Returns:
        A tuple of (config, error_message). If loading fails, error_message
        will contain details about the failure and config keeps whatever
        the script set before the error.
    """
    config = StreamTintConfig()
    init_path = path if path is not None else get_init_script_path()

    if not init_path.exists():
        return config, None

    sandbox = {
        '__builtins__': {
            'True': True,
            'False': False,
            'None': None,
            'str': str,
            'int': int,
            'float': float,
            'bool': bool,
            'list': list,
            'dict': dict,
            'tuple': tuple,
            'set': set,
            'len': len,
            'range': range,
            'enumerate': enumerate,
            'zip': zip,
            'print': print,
            '__import__': None,
            'open': None,
            'exec': None,
            'eval': None,
            'compile': None,
        },
        'config': config,
    }

    try:
        with open(init_path, 'r') as f:
            code = f.read()

        exec(code, sandbox)
        return config, None

    except Exception:
        error_msg = f"Error loading config from {init_path}:\n{traceback.format_exc()}"
        return config, error_msg
