"""
Change Notifications for Pixel Motion

The core never touches a widget. After every mutation it emits one of
these, and the presentation layer decides what to redraw:

- data_changed: layer list / timeline structure changed (rebuild listings)
- render_requested: the composite is stale (re-composite and repaint)
- frame_changed(int): the current timeline slot moved

"""

from PyQt6.QtCore import QObject, pyqtSignal


class EditorSignals(QObject):
    data_changed = pyqtSignal()
    render_requested = pyqtSignal()
    frame_changed = pyqtSignal(int)
