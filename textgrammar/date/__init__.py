"""Date string parsing.

Only the fixed cookie-style layout is recognized; fields are read literally
unless the policy asks for range validation.
"""

from .types import DatePolicy, ParsedDate
from .parsers import MONTH_ABBREVIATIONS, parse_date
