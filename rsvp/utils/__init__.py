from .constants import AppConstants, ResponseMessages
from .validation import ValidationHelpers

__all__ = ["AppConstants", "ResponseMessages", "ValidationHelpers"]
