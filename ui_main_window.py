"""
ui_main_window.py
Main window: stacks the list and edit screens, forwards user actions to the
NoteController and re-renders whenever the controller publishes a new state.
"""
import logging
import sqlite3

from PyQt5 import QtWidgets

from services.notes import NoteController
from services.state import AppState, Screen
from settings_manager import (
    get_preview_lines,
    get_window_geometry,
    get_window_maximized,
    set_window_geometry,
    set_window_maximized,
)
from ui_edit_screen import EditScreen
from ui_list_screen import APP_TITLE, ListScreen
from ui_toast import show_toast

logger = logging.getLogger(__name__)

DEFAULT_SIZE = (420, 720)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, controller: NoteController, preview_lines: int = None, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle(APP_TITLE)
        self.resize(*DEFAULT_SIZE)

        if preview_lines is None:
            preview_lines = get_preview_lines()
        self.stack = QtWidgets.QStackedWidget(self)
        self.list_screen = ListScreen(preview_lines, self.stack)
        self.edit_screen = EditScreen(self.stack)
        self.stack.addWidget(self.list_screen)
        self.stack.addWidget(self.edit_screen)
        self.setCentralWidget(self.stack)

        self._rendered_screen = None
        self._rendered_notes = None

        self.list_screen.add_requested.connect(self.controller.new_note)
        self.list_screen.note_activated.connect(self.controller.open_note)
        self.edit_screen.title_edited.connect(self.controller.edit_title)
        self.edit_screen.content_edited.connect(self.controller.edit_content)
        self.edit_screen.importance_committed.connect(self.controller.edit_importance)
        self.edit_screen.save_requested.connect(self.save_note)
        self.edit_screen.back_requested.connect(self.controller.back)
        self.edit_screen.delete_requested.connect(self.controller.delete)

        self.controller.subscribe(self.render_state)
        self.render_state(self.controller.state)

    def render_state(self, state: AppState):
        if state.screen is Screen.LIST:
            if state.notes is not self._rendered_notes:
                self.list_screen.show_notes(state.notes)
                self._rendered_notes = state.notes
            self.stack.setCurrentWidget(self.list_screen)
        else:
            # Fill the editor only on entry; later states come from its own edits
            if self._rendered_screen is not Screen.EDIT:
                self.edit_screen.load_draft(state.draft, state.is_inserting)
            self.stack.setCurrentWidget(self.edit_screen)
        self._rendered_screen = state.screen

    def save_note(self):
        try:
            self.controller.save()
        except sqlite3.IntegrityError as exc:
            draft = self.controller.state.draft
            logger.warning("Save rejected for title %r: %s", draft.title if draft else None, exc)
            show_toast(self, "A note with this title already exists.", kind="error")

    # --- Window geometry ---

    def restore_geometry_from_settings(self):
        geom = get_window_geometry()
        if geom:
            self.setGeometry(int(geom["x"]), int(geom["y"]), int(geom["w"]), int(geom["h"]))
        if get_window_maximized():
            self.showMaximized()

    def closeEvent(self, event):
        try:
            set_window_maximized(self.isMaximized())
            if not self.isMaximized():
                g = self.geometry()
                set_window_geometry(g.x(), g.y(), g.width(), g.height())
        except Exception:
            logger.exception("Could not save window geometry")
        self.controller.close()
        super().closeEvent(event)
