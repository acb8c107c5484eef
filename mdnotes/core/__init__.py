from .filenames import note_stem, sanitize_title, unique_filename, unique_identifier
from .models import Note

__all__ = ["sanitize_title",
           "note_stem",
           "unique_filename",
           "unique_identifier",
           "Note"
           ]
