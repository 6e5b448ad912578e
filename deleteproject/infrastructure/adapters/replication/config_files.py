"""Readers for the configuration file formats in the replication chain.

Two formats are involved:
- git-style config files (the daemon config, ``[core] gitmsconfig = ...``)
- Java-style properties files (the daemon's application properties and,
  read the same way, a repository's own ``config`` file)

Both readers return None when the file is absent or not readable, and raise
ConfigurationUnreadableError only when a readable file fails to load.
"""

from __future__ import annotations

import configparser
import os
from pathlib import Path

from deleteproject.domain.errors import ConfigurationUnreadableError

_PROPERTY_COMMENT_PREFIXES = ("#", "!")
_PROPERTY_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def is_readable_file(path: Path) -> bool:
    """Check that path is a regular file the process may read."""
    return path.is_file() and os.access(path, os.R_OK)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationUnreadableError(str(path), str(e)) from e


class GitConfig:
    """Parsed git-style configuration file.

    Section and key names are matched case-insensitively, as git does.
    Subsections (``[remote "origin"]``) are kept as part of the section name.
    """

    def __init__(self, parser: configparser.ConfigParser) -> None:
        self._parser = parser

    def get_string(self, section: str, key: str) -> str | None:
        """Get a value, or None when the section or key is absent.

        Args:
            section: Section name, e.g. "core".
            key: Key name within the section.

        Returns:
            The unquoted value, or None.
        """
        for name in self._parser.sections():
            if name.strip().lower() != section.lower():
                continue
            value = self._parser.get(name, key.lower(), fallback=None)
            if value is None:
                continue
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1]
            return value
        return None

    @classmethod
    def load(cls, path: Path) -> GitConfig | None:
        """Load a git config file.

        Args:
            path: Path of the file.

        Returns:
            The parsed config, or None if the file is absent or unreadable.

        Raises:
            ConfigurationUnreadableError: If the file cannot be parsed.
        """
        if not is_readable_file(path):
            return None

        # git indents keys with tabs; configparser would treat those lines
        # as continuations, so indentation is dropped before parsing
        text = "\n".join(line.strip() for line in _read_text(path).splitlines())
        parser = configparser.ConfigParser(
            strict=False,
            interpolation=None,
            allow_no_value=True,
            delimiters=("=",),
            comment_prefixes=("#", ";"),
            inline_comment_prefixes=("#", ";"),
        )
        try:
            parser.read_string(text, source=str(path))
        except configparser.Error as e:
            raise ConfigurationUnreadableError(str(path), str(e)) from e
        return cls(parser)


def _unescape_property(text: str) -> str:
    result: list[str] = []
    chars = iter(text)
    for char in chars:
        if char != "\\":
            result.append(char)
            continue
        escaped = next(chars, "")
        if escaped == "u":
            code = "".join(next(chars, "") for _ in range(4))
            try:
                result.append(chr(int(code, 16)))
            except ValueError as e:
                raise ValueError(f"malformed \\u escape: \\u{code}") from e
        else:
            result.append(_PROPERTY_ESCAPES.get(escaped, escaped))
    return "".join(result)


def _split_property(line: str) -> tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in "=: \t\f":
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    """Parse Java properties text.

    Supports ``key=value``, ``key: value`` and ``key value`` forms, ``#`` and
    ``!`` comments, backslash line continuations and the usual escapes.
    Later duplicates win.

    Args:
        text: File contents.

    Returns:
        Mapping of property names to values.

    Raises:
        ValueError: On a malformed unicode escape.
    """
    properties: dict[str, str] = {}
    logical = ""
    for raw_line in text.splitlines():
        line = raw_line.lstrip(" \t\f")
        if not logical and (not line or line.startswith(_PROPERTY_COMMENT_PREFIXES)):
            continue

        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            logical += line[:-1]
            continue

        logical += line
        key, value = _split_property(logical)
        properties[_unescape_property(key)] = _unescape_property(value)
        logical = ""

    if logical:
        key, value = _split_property(logical)
        properties[_unescape_property(key)] = _unescape_property(value)
    return properties


def load_properties(path: Path) -> dict[str, str] | None:
    """Load a Java properties file.

    Args:
        path: Path of the file.

    Returns:
        The properties, or None if the file is absent or unreadable.

    Raises:
        ConfigurationUnreadableError: If the file cannot be read or parsed.
    """
    if not is_readable_file(path):
        return None
    text = _read_text(path)
    try:
        return parse_properties(text)
    except ValueError as e:
        raise ConfigurationUnreadableError(str(path), str(e)) from e
