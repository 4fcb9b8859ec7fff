"""Per-locale cache in front of the static resource loader."""

from __future__ import annotations

from lexicon.i18n.resources import CompiledCatalogue, ResourceLoader
from lexicon.logging import logger
from lexicon.services.exceptions import CatalogueLoadFailure


class NativeCatalogueLoader:
    def __init__(self, resource_loader: ResourceLoader) -> None:
        self.resource_loader = resource_loader
        self._catalogues: dict[str, CompiledCatalogue] = {}

    def catalogue(self, locale: str) -> CompiledCatalogue:
        catalogue = self._catalogues.get(locale)
        if catalogue is None:
            try:
                catalogue = self.resource_loader.load_catalogue(locale)
            except CatalogueLoadFailure:
                raise
            except Exception as exc:
                raise CatalogueLoadFailure(
                    f"Unable to load native catalogue for locale {locale!r}: {exc}",
                    locale=locale,
                ) from exc
            self._catalogues[locale] = catalogue
            logger.info("native_catalogue_loaded", locale=locale, messages=len(catalogue))
        return catalogue

    def get(self, locale: str, source: str, domain: str) -> str | None:
        """Return the native translation, treating blank values as missing."""

        catalogue = self.catalogue(locale)
        if not catalogue.has(source, domain):
            return None
        value = catalogue.get(source, domain)
        if not value or not value.strip():
            return None
        return value

    def is_loaded(self, locale: str) -> bool:
        return locale in self._catalogues


__all__ = ["NativeCatalogueLoader"]
