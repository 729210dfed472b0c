import pytest

from pixel_motion.config import EditorConfig
from pixel_motion.logic.colors import Color
from pixel_motion.logic.editor import Editor
from pixel_motion.logic.errors import OutOfRange

RED = Color(255, 0, 0, 255)


def test_bootstraps_with_one_layer(editor):
    doc = editor.document
    assert doc.layer_count == 1
    assert doc.layers[0].name == "Layer 1"
    assert (doc.current_layer_index, doc.current_frame_index) == (0, 0)
    assert (doc.width, doc.height, doc.frame_count) == (32, 32, 24)


def test_config_overrides_sizes():
    editor = Editor(EditorConfig(width=16, height=8, max_frames=6))
    assert (editor.document.width, editor.document.height) == (16, 8)
    assert editor.document.frame_count == 6


def test_editors_are_independent():
    a, b = Editor(), Editor()
    a.tools.pointer_down(0, 0)
    assert a.document.current_buffer().has_content()
    assert not b.document.current_buffer().has_content()


def test_add_layer_notifies(editor, emitted):
    layer = editor.add_layer()
    assert layer.name == "Layer 2"
    assert editor.document.current_layer_index == 1
    assert emitted == ["data", "render"]


def test_select_frame_notifies(editor, emitted):
    editor.select_frame(5)
    assert editor.document.current_frame_index == 5
    assert emitted == [("frame", 5), "render"]


def test_select_frame_out_of_range(editor, emitted):
    with pytest.raises(OutOfRange):
        editor.select_frame(24)
    assert emitted == []


def test_select_layer(editor, emitted):
    editor.add_layer()
    emitted.clear()
    editor.select_layer(0)
    assert editor.document.current_layer_index == 0
    assert emitted == ["data"]
    with pytest.raises(OutOfRange):
        editor.select_layer(2)


def test_advance_frame_wraps(editor):
    editor.select_frame(23)
    editor.advance_frame()
    assert editor.document.current_frame_index == 0
    editor.advance_frame()
    assert editor.document.current_frame_index == 1


def test_visibility_toggle_changes_render(editor, emitted):
    editor.document.current_buffer().set(0, 0, RED)
    assert editor.render().get(0, 0) == RED

    editor.toggle_layer_visibility(0)
    assert not editor.document.layers[0].visible
    assert editor.render().get(0, 0).a == 0
    assert emitted == ["data", "render"]


def test_setting_same_visibility_is_silent(editor, emitted):
    editor.set_layer_visible(0, True)
    assert emitted == []


def test_rename_layer(editor, emitted):
    editor.rename_layer(0, "Outline")
    assert editor.document.layers[0].name == "Outline"
    assert emitted == ["data"]


def test_onion_skin_render(editor, emitted):
    editor.document.layers[0].frames[0].set(0, 0, RED)
    editor.select_frame(1)
    assert editor.render().get(0, 0).a == 0

    emitted.clear()
    editor.toggle_onion_skin()
    assert editor.onion_skin_enabled
    assert emitted == ["render"]
    r, g, b, a = editor.render().get(0, 0)
    assert (r, g, b) == (255, 0, 0)
    assert 0 < a < 255


def test_onion_opacity_from_config():
    editor = Editor(EditorConfig(onion_skin_opacity=1.0))
    editor.document.layers[0].frames[0].set(0, 0, RED)
    editor.select_frame(1)
    editor.set_onion_skin(True)
    assert editor.render().get(0, 0) == RED


def test_render_preview_size(editor):
    editor.document.current_buffer().set(0, 0, RED)
    preview = editor.render_preview()
    assert (preview.width, preview.height) == (128, 128)
    assert preview.get(0, 0) == RED
    assert preview.get(3, 3) == RED
    assert preview.get(4, 4).a == 0
    assert editor.render_preview(16).width == 16
