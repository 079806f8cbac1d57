"""
services.state

Application state for the two-screen UI and the reducer that updates it.

The state is an immutable value; every change goes through reduce(state, action),
which never touches the database. Side effects live in services.notes.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from note_model import INSERT, Note


class Screen(Enum):
    LIST = "list"
    EDIT = "edit"


@dataclass(frozen=True)
class AppState:
    screen: Screen = Screen.LIST
    edit_index: int = INSERT
    draft: Optional[Note] = None
    notes: Tuple[Note, ...] = field(default_factory=tuple)

    @property
    def is_inserting(self) -> bool:
        return self.screen is Screen.EDIT and self.edit_index == INSERT


# --- Actions ---


@dataclass(frozen=True)
class NotesLoaded:
    notes: Tuple[Note, ...]


@dataclass(frozen=True)
class OpenNote:
    index: int


@dataclass(frozen=True)
class NewNote:
    pass


@dataclass(frozen=True)
class EditDraft:
    title: Optional[str] = None
    content: Optional[str] = None
    importance: Optional[int] = None


@dataclass(frozen=True)
class CloseEditor:
    pass


def _sorted_by_importance(notes) -> Tuple[Note, ...]:
    # sorted() is stable, so equal importance keeps the store order
    return tuple(sorted(notes, key=lambda n: n.importance, reverse=True))


def reduce(state: AppState, action) -> AppState:
    """Return the state that results from applying action to state."""
    if isinstance(action, NotesLoaded):
        return replace(state, notes=_sorted_by_importance(action.notes))

    if isinstance(action, OpenNote):
        if not 0 <= action.index < len(state.notes):
            raise IndexError(f"no note at position {action.index}")
        return replace(
            state,
            screen=Screen.EDIT,
            edit_index=action.index,
            draft=state.notes[action.index].copy(),
        )

    if isinstance(action, NewNote):
        return replace(state, screen=Screen.EDIT, edit_index=INSERT, draft=Note(""))

    if isinstance(action, EditDraft):
        if state.screen is not Screen.EDIT or state.draft is None:
            raise RuntimeError("no note is being edited")
        draft = state.draft.copy()
        if action.title is not None:
            draft.title = action.title
        if action.content is not None:
            draft.content = action.content
        if action.importance is not None:
            draft.importance = action.importance
        return replace(state, draft=draft)

    if isinstance(action, CloseEditor):
        return replace(state, screen=Screen.LIST, edit_index=INSERT, draft=None)

    raise TypeError(f"unknown action: {action!r}")
