"""
ui_edit_screen.py
The note editor: title, content and an importance slider, with Delete in the top
bar and Save / Back at the bottom.

Contract:
- load_draft() fills the widgets without emitting any edit signals.
- title_edited / content_edited fire on every keystroke.
- importance_committed fires when a slider drag ends, or straight away for
  keyboard and click changes (no drag in progress).
"""
from typing import Optional

from PyQt5 import QtWidgets
from PyQt5.QtCore import Qt, pyqtSignal

from note_model import IMPORTANCE_LEVELS, Note
from ui_list_screen import APP_TITLE

CONTENT_VISIBLE_LINES = 8


class EditScreen(QtWidgets.QWidget):
    title_edited = pyqtSignal(str)
    content_edited = pyqtSignal(str)
    importance_committed = pyqtSignal(int)
    save_requested = pyqtSignal()
    back_requested = pyqtSignal()
    delete_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._inserting = False

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
        self.delete_button = QtWidgets.QToolButton(self)
        self.delete_button.setObjectName("deleteNoteButton")
        self.delete_button.setText("Delete")
        self.delete_button.clicked.connect(self.delete_requested)
        top_bar.addWidget(self.delete_button)
        outer.addLayout(top_bar)

        form = QtWidgets.QVBoxLayout()
        form.setContentsMargins(12, 0, 12, 12)

        form.addWidget(QtWidgets.QLabel("Title", self))
        self.title_edit = QtWidgets.QLineEdit(self)
        self.title_edit.setObjectName("titleEdit")
        # textEdited is user-only, so programmatic setText never feeds back
        self.title_edit.textEdited.connect(self.title_edited)
        form.addWidget(self.title_edit)

        form.addSpacing(12)
        form.addWidget(QtWidgets.QLabel("Content", self))
        self.content_edit = QtWidgets.QPlainTextEdit(self)
        self.content_edit.setObjectName("contentEdit")
        line_height = self.content_edit.fontMetrics().lineSpacing()
        frame = 2 * self.content_edit.frameWidth() + 8
        self.content_edit.setMaximumHeight(line_height * CONTENT_VISIBLE_LINES + frame)
        self.content_edit.textChanged.connect(self._on_content_changed)
        form.addWidget(self.content_edit)

        form.addSpacing(12)
        importance_row = QtWidgets.QHBoxLayout()
        importance_row.addWidget(QtWidgets.QLabel("Importance (1-5)", self))
        importance_row.addStretch(1)
        self.importance_value = QtWidgets.QLabel(self)
        self.importance_value.setObjectName("importanceValue")
        importance_row.addWidget(self.importance_value)
        form.addLayout(importance_row)

        self.importance_slider = QtWidgets.QSlider(Qt.Horizontal, self)
        self.importance_slider.setObjectName("importanceSlider")
        self.importance_slider.setRange(0, IMPORTANCE_LEVELS - 1)
        self.importance_slider.setSingleStep(1)
        self.importance_slider.setPageStep(1)
        self.importance_slider.setTickInterval(1)
        self.importance_slider.setTickPosition(QtWidgets.QSlider.TicksBelow)
        self.importance_slider.valueChanged.connect(self._on_slider_value_changed)
        self.importance_slider.sliderReleased.connect(self._on_slider_released)
        form.addWidget(self.importance_slider)
        form.addStretch(1)

        buttons = QtWidgets.QHBoxLayout()
        buttons.addStretch(1)
        self.save_button = QtWidgets.QPushButton("Save", self)
        self.save_button.setObjectName("saveButton")
        self.save_button.setDefault(True)
        self.save_button.clicked.connect(self.save_requested)
        buttons.addWidget(self.save_button)
        buttons.addSpacing(12)
        self.back_button = QtWidgets.QPushButton("Back", self)
        self.back_button.setObjectName("backButton")
        self.back_button.clicked.connect(self.back_requested)
        buttons.addWidget(self.back_button)
        buttons.addStretch(1)
        form.addLayout(buttons)

        outer.addLayout(form, 1)

    @property
    def inserting(self) -> bool:
        return self._inserting

    def load_draft(self, draft: Optional[Note], inserting: bool):
        """Show draft in the widgets. Emits no edit signals."""
        self._inserting = inserting
        draft = draft if draft is not None else Note("")
        self.title_edit.setText(draft.title)
        self.content_edit.blockSignals(True)
        try:
            self.content_edit.setPlainText(draft.content)
        finally:
            self.content_edit.blockSignals(False)
        self.importance_slider.blockSignals(True)
        try:
            self.importance_slider.setValue(draft.importance)
        finally:
            self.importance_slider.blockSignals(False)
        self._show_importance(draft.importance)
        self.delete_button.setToolTip("Discard note" if inserting else "Delete note")
        self.title_edit.setFocus()

    def _show_importance(self, value: int):
        self.importance_value.setText(f"{value + 1} / {IMPORTANCE_LEVELS}")

    def _on_content_changed(self):
        self.content_edited.emit(self.content_edit.toPlainText())

    def _on_slider_value_changed(self, value: int):
        self._show_importance(value)
        if not self.importance_slider.isSliderDown():
            self.importance_committed.emit(value)

    def _on_slider_released(self):
        self.importance_committed.emit(self.importance_slider.value())
