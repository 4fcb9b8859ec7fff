"""Domain-specific exceptions."""


class TranslationError(Exception):
    pass


class InvalidLocale(TranslationError, ValueError):
    def __init__(self, locale: object) -> None:
        super().__init__(f'Invalid "{locale}" locale.')
        self.locale = locale


class CatalogueLoadFailure(TranslationError):
    def __init__(self, message: str, *, locale: str, domain: str | None = None) -> None:
        super().__init__(message)
        self.locale = locale
        self.domain = domain


class PersistFailure(TranslationError):
    def __init__(self, message: str, *, pending: int) -> None:
        super().__init__(message)
        self.pending = pending
