# ui/view.py

from __future__ import annotations

import wx
from typing import Optional

from core.log import Log
from core.flowchart import FlowchartController
from core.scene import Scene, Hit, build_scene, hit_test, PART_BOX, PART_TOGGLE, PART_ADD

from ui.constants import REM_PX, MARGIN_PX, DEFAULT_BG_COLOR
from ui.paint import paint_background, paint_scene
from ui.inline_editor import InlineEditor

# =============================================================================
class FlowchartView(wx.ScrolledWindow):
    """
    GraphicsContext-based view of the flowchart.

    Holds no geometry of its own beyond the last Scene: every accepted
    mutation goes through the controller and then rebuild() lays the whole
    tree out again.
    """

    def __init__(self, parent: wx.Window, controller: FlowchartController, on_change=None):
        super().__init__(parent, style=wx.BORDER_SIMPLE | wx.WANTS_CHARS)

        self.controller = controller
        self._on_change = on_change
        self.scene: Scene = Scene()
        self._hover: Optional[Hit] = None

        self.editor = InlineEditor(self)

        # appearance + scrolling
        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.SetDoubleBuffered(True)
        self.SetBackgroundColour(DEFAULT_BG_COLOR)
        self.SetScrollRate(1, 1)

        self._font = self.GetFont()
        self._bold = wx.Font(
            self._font.GetPointSize(),
            self._font.GetFamily(),
            wx.FONTSTYLE_NORMAL,
            wx.FONTWEIGHT_BOLD,
        )

        # event bindings
        self.Bind(wx.EVT_PAINT, self._on_paint)
        self.Bind(wx.EVT_SIZE, self._on_size)
        self.Bind(wx.EVT_LEFT_DOWN, self._on_left_down)
        self.Bind(wx.EVT_LEFT_DCLICK, self._on_left_dclick)
        self.Bind(wx.EVT_MOTION, self._on_motion)
        self.Bind(wx.EVT_SCROLLWIN, self._on_scroll)

        self.rebuild()

    # ------------------------------------------------------------------
    # layout
    # ------------------------------------------------------------------

    def _origin(self, extent_w: float) -> tuple[float, float]:
        """Top-left of the flowchart in rem, centered when it fits."""
        client_w = self.GetClientSize().width
        left_px = max(MARGIN_PX, (client_w - extent_w * REM_PX) / 2)
        return left_px / REM_PX, MARGIN_PX / REM_PX

    def rebuild(self) -> None:
        """Re-derive the scene from the controller's current state."""
        layout = self.controller.layout()
        ox, oy = self._origin(layout.extent_width)
        self.scene = build_scene(layout, ox, oy)

        total_w = int((ox + self.scene.width) * REM_PX) + MARGIN_PX
        total_h = int((oy + self.scene.height) * REM_PX) + MARGIN_PX
        self.SetVirtualSize((total_w, total_h))

        self.editor.reposition()
        self.Refresh()
        if callable(self._on_change):
            self._on_change()

    # ------------------------------------------------------------------
    # hit testing
    # ------------------------------------------------------------------

    def _hit(self, pos: wx.Point) -> Optional[Hit]:
        x, y = self.CalcUnscrolledPosition(pos.x, pos.y)
        return hit_test(self.scene, x / REM_PX, y / REM_PX)

    # ------------------------------------------------------------------
    # public API used by MainFrame
    # ------------------------------------------------------------------

    def edit_node(self, node_id: str) -> None:
        self.editor.begin(node_id)

    def add_child(self, parent_id: str) -> Optional[str]:
        new_id = self.controller.add_child(parent_id)
        if new_id:
            self.rebuild()
        return new_id

    def toggle_children(self, node_id: str) -> bool:
        changed = self.controller.toggle_visibility(node_id)
        if changed:
            self.rebuild()
        return changed

    def set_truncate(self, truncate: bool) -> bool:
        changed = self.controller.set_truncate_mode(truncate)
        if changed:
            self.rebuild()
        return changed

    # ------------------------------------------------------------------
    # events
    # ------------------------------------------------------------------

    def _on_paint(self, _evt):
        dc = wx.AutoBufferedPaintDC(self)
        gc = wx.GraphicsContext.Create(dc)
        if gc is None:
            return

        paint_background(self, gc)
        sx, sy = self.CalcScrolledPosition(0, 0)
        gc.Translate(sx, sy)
        paint_scene(self, gc, self.scene, self._hover)

    def _on_size(self, evt):
        self.rebuild()
        evt.Skip()

    def _on_scroll(self, evt):
        evt.Skip()
        wx.CallAfter(self.editor.reposition)

    def _on_left_down(self, evt):
        hit = self._hit(evt.GetPosition())
        self.SetFocus()
        if hit is None:
            return

        if hit.part == PART_ADD:
            self.add_child(hit.node_id)
        elif hit.part == PART_TOGGLE:
            self.toggle_children(hit.node_id)

    def _on_left_dclick(self, evt):
        hit = self._hit(evt.GetPosition())
        if hit is not None and hit.part == PART_BOX:
            Log.debug(f"Double-click on '{hit.node_id}'", 2)
            self.edit_node(hit.node_id)

    def _on_motion(self, evt):
        hit = self._hit(evt.GetPosition())
        if hit != self._hover:
            self._hover = hit
            self._update_tooltip(hit)
            self.Refresh()
        evt.Skip()

    def _update_tooltip(self, hit: Optional[Hit]) -> None:
        tip = None
        if hit is not None and hit.part == PART_BOX:
            box = self.scene.box_for(hit.node_id)
            tip = box.tooltip if box else None
        elif hit is not None and hit.part == PART_ADD:
            tip = "Add child"
        elif hit is not None and hit.part == PART_TOGGLE:
            node = self.controller.node(hit.node_id)
            tip = "Hide children" if node and node.children_visible else "Show children"

        if tip:
            self.SetToolTip(tip)
        else:
            self.UnsetToolTip()
