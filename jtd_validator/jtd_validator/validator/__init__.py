from .engine import Validator, is_valid, validate
from .indicator import ValidationErrorIndicator
from .options import ValidateOptions
