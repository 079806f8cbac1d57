from PyQt5 import QtCore, QtWidgets

_TOAST_COLORS = {
    "info": "rgba(33, 33, 33, 220)",
    "error": "rgba(183, 28, 28, 230)",
}


def show_toast(parent: QtWidgets.QWidget, text: str, duration_ms: int = 2500, kind: str = "info"):
    """
    Show a small, temporary toast notification over the given parent window.

    - parent: any widget; the toast is placed over its top-level window
    - text: message to display
    - duration_ms: how long the toast stays visible before auto-dismiss
    - kind: "info" (dark) or "error" (red) background
    """
    if parent is None:
        return None

    window = parent.window()
    if window is None:
        return None

    # Child label, so it moves and closes with the window
    label = QtWidgets.QLabel(window)
    label.setObjectName("toast")
    label.setText(text)
    label.setWordWrap(True)
    label.setAlignment(QtCore.Qt.AlignCenter)
    label.setAttribute(QtCore.Qt.WA_TransparentForMouseEvents, True)
    background = _TOAST_COLORS.get(kind, _TOAST_COLORS["info"])
    label.setStyleSheet(
        f"""
        QLabel {{
            background-color: {background};
            color: #ffffff;
            border-radius: 8px;
            padding: 8px 12px;
        }}
        """
    )
    label.setMaximumWidth(max(120, window.width() - 48))
    label.adjustSize()

    # Bottom-center of the window, in window coordinates
    margin = 24
    x = (window.width() - label.width()) // 2
    y = window.height() - label.height() - margin
    label.move(max(0, x), max(0, y))
    label.raise_()
    label.show()

    QtCore.QTimer.singleShot(duration_ms, label.deleteLater)

    return label
