from lexicon.db.models.core import Translation

__all__ = ["Translation"]
