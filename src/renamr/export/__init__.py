"""Output encodings for suggestion batches."""
from renamr.export.writer import (
    FORMAT_DESCRIPTIONS,
    OutputFormat,
    ResultWriter,
)

__all__ = ["OutputFormat", "ResultWriter", "FORMAT_DESCRIPTIONS"]
