from .catalog import load_catalog, normalize_document
from .dates import format_date

__all__ = ["format_date", "load_catalog", "normalize_document"]
