from .builder import EnvelopeBuilder
from .merger import ResponseMerger, resolve_log_level

__all__ = ["EnvelopeBuilder", "ResponseMerger", "resolve_log_level"]
