"""
note_model.py
Defines the Note record shown in the list and edit screens, plus the sentinels
shared by the database helpers and the editor.
"""

NOT_FOUND = -1  # id of a note that is not (yet) stored, also "no row matched"
INSERT = -1  # edit target meaning "new note, no list entry behind it"

IMPORTANCE_LEVELS = 5


def normalize_importance(value) -> int:
    """Wrap any integer into the 0..4 importance range (never rejects)."""
    return ((int(value) % IMPORTANCE_LEVELS) + IMPORTANCE_LEVELS) % IMPORTANCE_LEVELS


class Note:
    """A single to-do note.

    id stays NOT_FOUND until the note is first inserted; save_note() writes the
    generated row id back onto the instance.
    """

    def __init__(self, title: str, content: str = "", importance: int = 0, id: int = NOT_FOUND):
        self.title = title
        self.content = content
        self.importance = importance
        self.id = id

    @property
    def importance(self) -> int:
        return self._importance

    @importance.setter
    def importance(self, value):
        self._importance = normalize_importance(value)

    @property
    def is_persisted(self) -> bool:
        return self.id != NOT_FOUND

    def copy(self) -> "Note":
        """Return an independent copy, used as the editor draft."""
        return Note(self.title, self.content, self.importance, self.id)

    def __eq__(self, other):
        if not isinstance(other, Note):
            return NotImplemented
        return (self.id, self.title, self.content, self.importance) == (
            other.id,
            other.title,
            other.content,
            other.importance,
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"Note(title={self.title!r}, content={self.content!r}, "
            f"importance={self.importance}, id={self.id})"
        )
