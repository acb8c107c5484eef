from .backup import BackupManager
from .filesystem import atomic_write_bytes, atomic_write_text, read_text

__all__ = ["BackupManager",
           "atomic_write_bytes",
           "atomic_write_text",
           "read_text"
           ]
