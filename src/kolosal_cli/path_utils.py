"""Path mapping for settings and log file arguments.

Supported forms:
- ~ or ~/... → user home directory
- Native absolute paths → used as-is
- Relative paths → resolved against ``base_dir`` when given, otherwise error
"""

from pathlib import Path, PureWindowsPath
import unicodedata

from .errors import ConfigError


def has_home_path_prefix(path: str) -> bool:
    """Return True when path uses the supported home prefix forms."""
    return path == "~" or path.startswith("~/") or path.startswith("~\\")


def _normalize_path_input(path: str) -> str:
    """Normalize input text to NFC and reject NUL characters."""
    if "\x00" in path:
        raise ConfigError("Path contains NUL character")
    return unicodedata.normalize("NFC", path)


def map_path(path: str, base_dir: str | None = None) -> str:
    """Map a path with an optional ``~`` prefix to an absolute path.

    Args:
        path: Path to map (``~``-prefixed, absolute, or relative to base_dir)
        base_dir: Directory for relative paths; relative paths are rejected
            when omitted

    Returns:
        Absolute path string

    Raises:
        ConfigError: If path is relative and no base_dir is given, escapes the home
            directory, or is a Windows absolute path on a non-Windows host

    Examples:
        >>> map_path("~/.kolosal/settings.json")
        '/Users/username/.kolosal/settings.json'

        >>> map_path("relative/settings.json")
        ConfigError: Relative paths without prefix are not supported
    """
    path = _normalize_path_input(path)

    if has_home_path_prefix(path):
        home_dir = Path.home().resolve()
        if path == "~":
            return str(home_dir)

        resolved = (home_dir / path[2:]).resolve()
        try:
            resolved.relative_to(home_dir)
        except ValueError:
            raise ConfigError(f"Path escapes home directory: {path}")
        return str(resolved)

    if PureWindowsPath(path).is_absolute() and not Path(path).is_absolute():
        raise ConfigError(
            f"Windows absolute paths are not supported on this platform: {path}"
        )

    if Path(path).is_absolute():
        return str(Path(path).resolve())

    if base_dir is not None:
        return str((Path(base_dir) / path).resolve())

    raise ConfigError(
        f"Relative paths without prefix are not supported: {path}\n"
        "Use '~/' for home directory or provide an absolute path"
    )
