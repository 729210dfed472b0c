import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from pixel_motion.logic.editor import Editor


@pytest.fixture(autouse=True)
def _qt_app(qapp):
    """Signals and widgets need a live QApplication"""
    return qapp


@pytest.fixture
def editor():
    return Editor()


@pytest.fixture
def emitted(editor):
    """Record every signal the editor emits, in order"""
    events = []
    editor.signals.data_changed.connect(lambda: events.append("data"))
    editor.signals.render_requested.connect(lambda: events.append("render"))
    editor.signals.frame_changed.connect(lambda i: events.append(("frame", i)))
    return events
