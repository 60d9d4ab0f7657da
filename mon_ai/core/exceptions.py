class VocabularyNotFound(Exception):
    """No vocabulary row matched the (normalized) word."""

    def __init__(self, word: str):
        super().__init__(f"Word not found: {word}")
        self.word = word


class TranslatorConfigurationError(Exception):
    """The external completion API credential is not configured."""


class TranslationError(Exception):
    """The external completion API failed or returned a non-JSON reply."""
