"""Core models, input resolution and error types."""

from .errors import EsconvError, MissingInputError  # noqa: F401
from .models import ConversionInput, EffectSizeResult, EffectSizeType  # noqa: F401
from .normalization import default_info, is_missing, normalize_totaln, resolve_variance  # noqa: F401
