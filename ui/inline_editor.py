from __future__ import annotations
from typing import Optional
import wx

from core.log import Log
from ui.constants import REM_PX

class InlineEditor:
    """
    Manages the lifecycle of a single inline TextCtrl editor over a flowchart box.
    Enter commits, Escape cancels, losing focus commits.
    Every keystroke is pushed to the controller's edit buffer so the box
    (and this control) resize while typing.
    """

    def __init__(self, view):
        self._view = view
        self._ctrl: Optional[wx.TextCtrl] = None
        self._node_id: Optional[str] = None
        self._closing = False

    # --- properties ---
    @property
    def ctrl(self) -> Optional[wx.TextCtrl]:
        return self._ctrl

    @property
    def active(self) -> bool:
        return self._ctrl is not None

    @property
    def node_id(self) -> Optional[str]:
        return self._node_id

    # --- helpers ---
    def _compute_geometry(self) -> Optional[wx.Rect]:
        box = self._view.scene.box_for(self._node_id) if self._node_id else None
        if box is None:
            return None
        x, y = self._view.CalcScrolledPosition(
            int(box.x * REM_PX), int(box.y * REM_PX)
        )
        return wx.Rect(x, y, int(box.width * REM_PX), int(box.height * REM_PX))

    # --- public API ---
    def begin(self, node_id: str):
        # If already editing another box, the controller commits it
        if self._ctrl is not None:
            self._destroy()

        controller = self._view.controller
        if not controller.begin_edit(node_id) and controller.editing_id != node_id:
            return

        self._node_id = node_id
        self._view.rebuild()

        rect = self._compute_geometry()
        if rect is None:
            return

        ed = wx.TextCtrl(
            self._view,
            value=controller.edit_text,
            style=wx.TE_PROCESS_ENTER | wx.TE_CENTER | wx.BORDER_SIMPLE,
        )
        ed.SetFont(self._view._bold)
        ed.SetSize(rect)
        ed.Raise()
        ed.SetFocus()
        ed.SelectAll()
        self._ctrl = ed

        def _on_kill_focus(evt):
            evt.Skip()
            # Destroying the control inside its own focus event is unsafe
            wx.CallAfter(self._commit_if_current, ed)

        def _on_key_down(evt: wx.KeyEvent):
            code = evt.GetKeyCode()
            if code == wx.WXK_ESCAPE:
                self.cancel()
                return
            if code in (wx.WXK_RETURN, wx.WXK_NUMPAD_ENTER):
                self.commit()
                return
            evt.Skip()

        def _on_text(_evt):
            if self._ctrl is None:
                return
            controller.set_edit_text(self._ctrl.GetValue())
            self._view.rebuild()
            self.reposition()

        ed.Bind(wx.EVT_KILL_FOCUS, _on_kill_focus)
        ed.Bind(wx.EVT_KEY_DOWN, _on_key_down)
        ed.Bind(wx.EVT_TEXT, _on_text)
        Log.debug(f"Inline editor opened for '{node_id}'", 2)

    def _destroy(self):
        if self._ctrl is not None:
            ctrl, self._ctrl = self._ctrl, None
            ctrl.Unbind(wx.EVT_KILL_FOCUS)
            ctrl.Destroy()
        self._node_id = None

    def _commit_if_current(self, ctrl: wx.TextCtrl):
        if self._ctrl is ctrl:
            self.commit()

    def commit(self):
        if self._closing or not self._ctrl or not self._node_id:
            return
        self._closing = True
        try:
            text = self._ctrl.GetValue()
            node_id = self._node_id
            self._destroy()
            self._view.controller.commit_edit(node_id, text)
            self._view.rebuild()
        finally:
            self._closing = False

    def cancel(self):
        if self._closing or not self._node_id:
            return
        self._closing = True
        try:
            node_id = self._node_id
            self._destroy()
            self._view.controller.cancel_edit(node_id)
            self._view.rebuild()
        finally:
            self._closing = False

    def reposition(self):
        """Follow the box after a resize, scroll or re-layout."""
        if not self._ctrl:
            return
        rect = self._compute_geometry()
        if rect is not None:
            self._ctrl.SetSize(rect)
