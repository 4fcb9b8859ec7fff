from lexicon.domain.models import TranslationEntry

__all__ = ["TranslationEntry"]
