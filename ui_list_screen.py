"""
ui_list_screen.py
The note list screen: a top bar with the add button and one clickable card per
note (importance badge, bold title, short content preview).
"""
from typing import List, Sequence

from PyQt5 import QtWidgets
from PyQt5.QtCore import Qt, pyqtSignal

from note_model import Note

APP_TITLE = "✏️ Have to do"

# Indexed by importance 0..4
IMPORTANCE_COLORS = ("#FFD180", "#CCFF90", "#84FFFF", "#8C9EFF", "#FF80AB")

BADGE_SIZE = 26


def importance_color(importance: int) -> str:
    return IMPORTANCE_COLORS[importance]


def preview_text(content: str, max_lines: int) -> str:
    """Return at most max_lines lines of content, with an ellipsis when cut."""
    lines = (content or "").splitlines()
    if len(lines) <= max_lines:
        return "\n".join(lines)
    return "\n".join(lines[:max_lines]) + " …"


class NoteCard(QtWidgets.QFrame):
    """One row of the list; emits clicked(index) on a left click."""

    clicked = pyqtSignal(int)

    def __init__(self, note: Note, index: int, preview_lines: int, parent=None):
        super().__init__(parent)
        self.index = index
        self.setObjectName("noteCard")
        self.setCursor(Qt.PointingHandCursor)
        self.setFrameShape(QtWidgets.QFrame.StyledPanel)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)
        layout.setSpacing(8)

        self.badge = QtWidgets.QLabel(self)
        self.badge.setObjectName("importanceBadge")
        self.badge.setFixedSize(BADGE_SIZE, BADGE_SIZE)
        self.badge.setToolTip(f"Importance {note.importance + 1} of 5")
        self.badge.setStyleSheet(
            f"background-color: {importance_color(note.importance)};"
            f" border-radius: {BADGE_SIZE // 2}px;"
        )
        layout.addWidget(self.badge, 0, Qt.AlignTop)

        text_col = QtWidgets.QVBoxLayout()
        text_col.setSpacing(2)
        self.title_label = QtWidgets.QLabel(note.title, self)
        self.title_label.setObjectName("noteTitle")
        font = self.title_label.font()
        font.setBold(True)
        font.setPointSize(font.pointSize() + 3)
        self.title_label.setFont(font)
        text_col.addWidget(self.title_label)

        self.content_label = QtWidgets.QLabel(preview_text(note.content, preview_lines), self)
        self.content_label.setObjectName("noteContent")
        self.content_label.setStyleSheet("color: rgba(0, 0, 0, 153);")
        self.content_label.setTextFormat(Qt.PlainText)
        self.content_label.setWordWrap(True)
        text_col.addWidget(self.content_label)
        layout.addLayout(text_col, 1)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton and self.rect().contains(event.pos()):
            self.clicked.emit(self.index)
            event.accept()
            return
        super().mouseReleaseEvent(event)


class ListScreen(QtWidgets.QWidget):
    add_requested = pyqtSignal()
    note_activated = pyqtSignal(int)

    def __init__(self, preview_lines: int = 3, parent=None):
        super().__init__(parent)
        self.preview_lines = preview_lines
        self.cards: List[NoteCard] = []

        outer = QtWidgets.QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        top_bar = QtWidgets.QHBoxLayout()
        top_bar.setContentsMargins(12, 12, 12, 12)
        title = QtWidgets.QLabel(APP_TITLE, self)
        title_font = title.font()
        title_font.setPointSize(title_font.pointSize() + 6)
        title.setFont(title_font)
        top_bar.addWidget(title)
        top_bar.addStretch(1)
        self.add_button = QtWidgets.QToolButton(self)
        self.add_button.setObjectName("addNoteButton")
        self.add_button.setText("+")
        self.add_button.setToolTip("Add note")
        self.add_button.clicked.connect(self.add_requested)
        top_bar.addWidget(self.add_button)
        outer.addLayout(top_bar)

        self.scroll = QtWidgets.QScrollArea(self)
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QtWidgets.QFrame.NoFrame)
        self._list_host = QtWidgets.QWidget()
        self._list_layout = QtWidgets.QVBoxLayout(self._list_host)
        self._list_layout.setContentsMargins(8, 8, 8, 8)
        self._list_layout.setSpacing(2)
        self._list_layout.addStretch(1)
        self.scroll.setWidget(self._list_host)
        outer.addWidget(self.scroll, 1)

    def show_notes(self, notes: Sequence[Note]):
        """Rebuild every card from notes; the list is never patched in place."""
        for card in self.cards:
            self._list_layout.removeWidget(card)
            card.deleteLater()
        self.cards = []
        for i, note in enumerate(notes):
            card = NoteCard(note, i, self.preview_lines, self._list_host)
            card.clicked.connect(self.note_activated)
            # Keep the trailing stretch last
            self._list_layout.insertWidget(self._list_layout.count() - 1, card)
            self.cards.append(card)
