"""
Notes API — In-Memory Note Store
==================================

What:  Ordered, process-lifetime collection of notes with list/create/delete.
How:   A Python list of frozen `Note` models guarded by a lock. Ids are derived
       from the last note in insertion order (last id + 1, or 1 when empty).
Who:   Owned by the application (`app.state.note_store`); injected into the
       notes router via `get_note_store`.
When:  Created once by `create_app()`; discarded when the process exits.

Id derivation:
    The next id comes from the LAST note, not from a running counter.
    Deleting the highest-id note and creating a new one therefore reuses
    that id:

        [1, 2, 3]  → delete 3 → [1, 2]  → create → [1, 2, 3]

    Deleting any other note never causes reuse while a later note exists.
"""

import logging
import threading
from typing import Iterable, List, Optional

from notes_api.exceptions import NotFoundError
from notes_api.schemas.note import Note

logger = logging.getLogger(__name__)

SEED_NOTE = Note(id=1, text="Welcome to Codespace demo!")


class NoteStore:
    """
    Holds notes in insertion order and answers list/create/delete.

    The store performs no input validation; callers reject missing or empty
    text before calling `create()`.

    Thread Safety:
        Every operation holds `self._lock` for its whole read-modify-write,
        so concurrent handlers on a thread pool see the same atomicity as the
        single-threaded event loop.
    """

    def __init__(self, notes: Optional[Iterable[Note]] = None):
        self._notes: List[Note] = list(notes or [])
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "NoteStore":
        """Store in its startup state: a single welcome note with id 1."""
        return cls([SEED_NOTE])

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def list(self) -> List[Note]:
        """Return a snapshot of all notes in insertion order."""
        with self._lock:
            return list(self._notes)

    def create(self, text: str) -> Note:
        """
        Append a new note and return it.

        Args:
            text: Note text, stored verbatim (no trimming).

        Returns:
            The created note with id = last note's id + 1, or 1 if empty.
        """
        with self._lock:
            next_id = self._notes[-1].id + 1 if self._notes else 1
            note = Note(id=next_id, text=text)
            self._notes.append(note)
        logger.info("Note %d created (%d chars)", note.id, len(text))
        return note

    def delete(self, note_id: int) -> Note:
        """
        Remove the note with the given id and return it.

        Raises:
            NotFoundError: No live note has this id; the store is unchanged.
        """
        with self._lock:
            for index, note in enumerate(self._notes):
                if note.id == note_id:
                    removed = self._notes.pop(index)
                    break
            else:
                raise NotFoundError(resource="note", resource_id=note_id)
        logger.info("Note %d deleted", removed.id)
        return removed
