"""Journal file access."""

from tradejournal.db.store import JournalData, JournalFileError, JournalStore

__all__ = ["JournalData", "JournalFileError", "JournalStore"]
