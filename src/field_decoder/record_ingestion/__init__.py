"""Raw record ingestion exports."""

from .record_reader import RecordReadError, load_raw_record

__all__ = ["RecordReadError", "load_raw_record"]
