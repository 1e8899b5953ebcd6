from .json_pointer import JsonPointer, escape_token, join_path, to_pointer
from .timestamp import is_rfc3339_timestamp
from .type_ranges import INTEGER_RANGES, is_number, fits_integer_range
