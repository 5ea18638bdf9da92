"""Exception hierarchy shared by the extraction and translation pipelines."""


class PipelineError(Exception):
    """Base exception for pipeline errors."""

    pass


class SourceNotFoundError(PipelineError):
    """A required input file is missing or cannot be read."""

    pass


class TranslationError(PipelineError):
    """A single translation call failed."""

    pass


class CredentialError(TranslationError):
    """The translation service credential is missing or was rejected.

    Unlike other translation errors this one is fatal for the whole run.
    """

    pass
