class BaseTool:
    """
    One drawing algorithm, driven by the ToolManager.

    Positions are grid coordinates and may lie off the canvas.
    """
    # Single-shot tools act on press and never enter a drag
    single_shot = False

    def __init__(self, manager):
        self.manager = manager

    def pointer_down(self, x, y): pass
    def pointer_move(self, start, end): pass
    def pointer_up(self): pass
