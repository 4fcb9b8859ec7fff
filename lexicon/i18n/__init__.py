from lexicon.i18n.buffer import WriteBackBuffer
from lexicon.i18n.cache import PersistentCatalogueCache
from lexicon.i18n.native import NativeCatalogueLoader
from lexicon.i18n.repository import TranslationRepository
from lexicon.i18n.resources import CompiledCatalogue, JsonResourceLoader, NullResourceLoader
from lexicon.i18n.selector import IntervalChoiceSelector
from lexicon.i18n.service import TranslationService

__all__ = [
    "CompiledCatalogue",
    "IntervalChoiceSelector",
    "JsonResourceLoader",
    "NativeCatalogueLoader",
    "NullResourceLoader",
    "PersistentCatalogueCache",
    "TranslationRepository",
    "TranslationService",
    "WriteBackBuffer",
]
