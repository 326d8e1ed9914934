"""Per-call scan configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

# Keys accepted by ScanOptions.from_mapping besides the field names.
_ALIASES = {"clearCache": "clear_cache", "listOf": "list_of"}


@dataclass(frozen=True)
class ScanOptions:
    """Options for one scan.

    Parameters
    ----------
    filter:
        ``True``/``False``, a substring, a compiled regex, a predicate, or
        one of the filter classes in :mod:`statscan.filters`.
    recursive:
        Whether to descend into subdirectories when the filter does not say.
    clear_cache:
        Empty the entry cache before scanning.
    list_of:
        Return only this attribute of each entry (called if it is a method).
    """

    filter: Any = True
    recursive: bool = True
    clear_cache: bool = False
    list_of: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ScanOptions:
        return cls(**_field_kwargs(data))

    @classmethod
    def coerce(
        cls, options: Any = None, **overrides: Any
    ) -> ScanOptions:
        """Build options from ``None``, a mapping or an instance, then apply *overrides*.

        Any other value is taken as the filter, so ``scan_sync(paths, "txt")``
        works like ``scan_sync(paths, filter="txt")``.
        """
        if options is None:
            base = cls()
        elif isinstance(options, ScanOptions):
            base = options
        elif isinstance(options, Mapping):
            base = cls.from_mapping(options)
        else:
            base = cls(filter=options)
        if overrides:
            base = replace(base, **_field_kwargs(overrides))
        return base


def _field_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(ScanOptions)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise TypeError(f"unknown scan option: {key!r}")
        kwargs[name] = value
    return kwargs
