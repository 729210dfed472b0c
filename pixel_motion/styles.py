def get_stylesheet(theme):
    return f"""
    /* === GLOBAL RESET === */
    QWidget {{
        font-family: '{theme['font_family_ui']}', sans-serif;
        font-size: {theme['font_size']};
        color: {theme['text_header']};
    }}

    /* === MAIN WINDOW === */
    QMainWindow {{
        background-color: {theme['window_bg']};
    }}

    /* === DOCK WIDGETS (The Windows) === */
    QDockWidget {{
        border: none;
    }}

    QDockWidget::title {{
        background: {theme['panel_bg']};
        padding: 6px;
        border-radius: 12px 12px 0px 0px;
    }}

    /* === PANEL CONTENT (The Cards) === */
    QFrame#PanelContent {{
        background-color: {theme['panel_bg']};
        border-radius: 0px 0px 12px 12px;
        border-bottom: 1px solid {theme['border_color']};
    }}

    /* === BUTTONS === */
    QPushButton {{
        background-color: {theme['btn_default']};
        color: {theme['btn_text']};
        border-radius: 8px;
        padding: 8px;
        font-weight: 600;
        border: none;
    }}

    QPushButton:hover {{
        background-color: {theme['btn_accent']};
        color: white;
    }}

    QPushButton:checked {{
        background-color: {theme['btn_accent']};
        color: black;
    }}

    /* === TIMELINE CELLS === */
    QPushButton#FrameCell {{
        background-color: {theme['cell_empty']};
        border-radius: 3px;
        padding: 0px;
    }}
    QPushButton#FrameCell[filled="true"] {{
        background-color: {theme['cell_filled']};
    }}
    QPushButton#FrameCell[active="true"] {{
        border: 2px solid {theme['cell_active']};
    }}
    """
