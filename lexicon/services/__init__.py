from lexicon.services.exceptions import (
    CatalogueLoadFailure,
    InvalidLocale,
    PersistFailure,
    TranslationError,
)

__all__ = [
    "CatalogueLoadFailure",
    "InvalidLocale",
    "PersistFailure",
    "TranslationError",
]
