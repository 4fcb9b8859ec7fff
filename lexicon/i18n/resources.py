"""Static translation resources compiled into per-locale catalogues.

Resources are JSON files named ``<domain>.<locale>.json``. Values may be
nested objects; nested keys are joined with ``.`` so that::

    {"nav": {"home": "Accueil"}}

is looked up as ``nav.home``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Protocol

from lexicon.logging import logger
from lexicon.services.exceptions import CatalogueLoadFailure


class CompiledCatalogue:
    """Read-only (source, domain) -> translation mapping for one locale."""

    def __init__(self, locale: str, messages: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self.locale = locale
        self._messages: dict[str, dict[str, str]] = {
            domain: dict(entries) for domain, entries in (messages or {}).items()
        }

    def has(self, source: str, domain: str = "messages") -> bool:
        return source in self._messages.get(domain, {})

    def get(self, source: str, domain: str = "messages") -> str:
        return self._messages.get(domain, {}).get(source, source)

    def domains(self) -> tuple[str, ...]:
        return tuple(sorted(self._messages))

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._messages.values())


class ResourceLoader(Protocol):
    def load_catalogue(self, locale: str) -> CompiledCatalogue: ...


def _flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, prefix=f"{full_key}."))
        elif value is None:
            flat[full_key] = ""
        else:
            flat[full_key] = str(value)
    return flat


class JsonResourceLoader:
    def __init__(self, resources_path: str | Path) -> None:
        self.resources_path = Path(resources_path)

    def load_catalogue(self, locale: str) -> CompiledCatalogue:
        if not self.resources_path.is_dir():
            raise CatalogueLoadFailure(
                f"Translation resources directory not found: {self.resources_path}",
                locale=locale,
            )

        messages: dict[str, dict[str, str]] = {}
        for file_path in sorted(self.resources_path.glob(f"*.{locale}.json")):
            domain = file_path.name[: -len(f".{locale}.json")]
            if not domain:
                continue
            try:
                with file_path.open("r", encoding="utf-8") as fp:
                    data = json.load(fp)
            except (OSError, ValueError) as exc:
                raise CatalogueLoadFailure(
                    f"Unable to read translation resource {file_path}: {exc}",
                    locale=locale,
                    domain=domain,
                ) from exc
            if not isinstance(data, Mapping):
                raise CatalogueLoadFailure(
                    f"Translation resource {file_path} must contain a JSON object.",
                    locale=locale,
                    domain=domain,
                )
            messages.setdefault(domain, {}).update(_flatten(data))

        return CompiledCatalogue(locale, messages)


class NullResourceLoader:
    """Loader for deployments that ship no static resources."""

    def load_catalogue(self, locale: str) -> CompiledCatalogue:
        logger.debug("native_resources_disabled", locale=locale)
        return CompiledCatalogue(locale)


__all__ = [
    "CompiledCatalogue",
    "JsonResourceLoader",
    "NullResourceLoader",
    "ResourceLoader",
]
