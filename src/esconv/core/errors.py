"""Exception types raised by the conversion routines."""


class EsconvError(Exception):
    """Base class for all esconv errors."""


class MissingInputError(EsconvError, ValueError):
    """Neither a standard error nor a variance could be resolved.

    Converters catch this and degrade to a missing result, so callers
    normally only see it when using :func:`resolve_variance` directly.
    """
