from .formatter import PhotoFormatter, format_long_date
from .lookup import PhotoLookup

__all__ = ["PhotoFormatter", "PhotoLookup", "format_long_date"]
