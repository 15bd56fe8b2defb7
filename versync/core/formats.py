import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from versync.core.exceptions import ManifestFormatError, VersionFieldNotFoundError

JSON_INDENT = 2


def _load_json_object(text: str, path: str) -> Dict[str, Any]:
    document = json.loads(text)
    if not isinstance(document, dict):
        raise ManifestFormatError(
            f"{path}: top-level JSON value is {type(document).__name__}, expected an object"
        )
    return document


def read_json_version(text: str, field: str, path: str = "<json>") -> Optional[str]:
    value = _load_json_object(text, path).get(field)
    return value if isinstance(value, str) else None


def update_json_version(text: str, field: str, version: str, path: str = "<json>") -> str:
    """
    Overwrite one top-level field of a JSON document and re-serialize it.

    Key order is kept (dicts preserve insertion order); a missing field is
    appended at the end. Output uses two-space indentation, leaves non-ASCII
    characters unescaped and ends with exactly one newline.
    """
    document = _load_json_object(text, path)
    document[field] = version
    return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def _toml_field_pattern(field: str) -> re.Pattern:
    # anchored at line start, double-quoted value, first match wins
    return re.compile(rf'^{re.escape(field)}\s*=\s*"([^"]+)"', re.MULTILINE)


def read_toml_version(text: str, field: str, path: str = "<toml>") -> Optional[str]:
    match = _toml_field_pattern(field).search(text)
    return match.group(1) if match else None


def update_toml_version(text: str, field: str, version: str, path: str = "<toml>") -> str:
    """Replace the first `field = "..."` line; every other byte of the text is kept."""
    new_text, count = _toml_field_pattern(field).subn(
        lambda match: f'{field} = "{version}"', text, count=1
    )
    if not count:
        raise VersionFieldNotFoundError(path, field)
    return new_text


@dataclass
class FormatDefinition:
    """How to read and rewrite the version field of one kind of manifest."""

    name: str
    description: str
    read: Callable[..., Optional[str]]
    update: Callable[..., str]


class FormatRegistry:
    """Registry of the manifest formats versync knows how to update."""

    def __init__(self) -> None:
        self._formats: Dict[str, FormatDefinition] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        self.register(
            FormatDefinition(
                name="json",
                description="JSON object, re-serialized with 2-space indentation",
                read=read_json_version,
                update=update_json_version,
            )
        )
        self.register(
            FormatDefinition(
                name="toml",
                description="TOML text, first top-of-line assignment patched in place",
                read=read_toml_version,
                update=update_toml_version,
            )
        )

    def register(self, format_def: FormatDefinition) -> None:
        self._formats[format_def.name] = format_def

    def get(self, name: str) -> FormatDefinition:
        if name not in self._formats:
            raise KeyError(f"Unknown format: {name}")
        return self._formats[name]

    def names(self) -> List[str]:
        return sorted(self._formats.keys())


format_registry = FormatRegistry()
