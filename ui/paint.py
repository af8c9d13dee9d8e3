'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Optional

import wx

from core.scene import Scene, Box, Control, Hit, PART_TOGGLE
from ui.constants import (
    REM_PX,
    DEFAULT_BG_COLOR,
    BOX_COLOR,
    BOX_TEXT_COLOR,
    LINE_COLOR,
    CONTROL_COLOR,
    CONTROL_HOVER_COLOR,
)

BOX_RADIUS = 8
LINE_WIDTH = 1

def _px(v: float) -> float:
    return v * REM_PX

def paint_background(view, gc: wx.GraphicsContext) -> None:
    """Fill the whole client area."""
    w, h = view.GetClientSize()
    bg = view.GetBackgroundColour()
    if not bg.IsOk():
        bg = DEFAULT_BG_COLOR

    gc.SetBrush(wx.Brush(bg))
    gc.SetPen(wx.Pen(bg))
    gc.DrawRectangle(0, 0, w, h)

def paint_segments(gc: wx.GraphicsContext, scene: Scene) -> None:
    gc.SetPen(wx.Pen(LINE_COLOR, LINE_WIDTH))
    for seg in scene.segments:
        gc.StrokeLine(_px(seg.x1), _px(seg.y1), _px(seg.x2), _px(seg.y2))

def _paint_box(view, gc: wx.GraphicsContext, box: Box) -> None:
    x, y, w, h = _px(box.x), _px(box.y), _px(box.width), _px(box.height)
    gc.SetBrush(wx.Brush(BOX_COLOR))
    gc.SetPen(wx.Pen(BOX_COLOR))
    gc.DrawRoundedRectangle(x, y, w, h, BOX_RADIUS)

    # Centered single line of text, clipped to the box
    gc.SetFont(view._bold, BOX_TEXT_COLOR)
    tw, th = gc.GetTextExtent(box.text)
    gc.PushState()
    gc.Clip(x, y, w, h)
    gc.DrawText(box.text, x + (w - tw) / 2, y + (h - th) / 2)
    gc.PopState()

def _paint_control(view, gc: wx.GraphicsContext, control: Control, hovered: bool) -> None:
    x, y, s = _px(control.x), _px(control.y), _px(control.size)
    color = CONTROL_HOVER_COLOR if hovered else CONTROL_COLOR

    gc.SetPen(wx.Pen(color, 1))
    gc.SetBrush(wx.Brush(wx.Colour(0, 0, 0, 0)))
    gc.DrawEllipse(x, y, s, s)

    cx, cy = x + s / 2, y + s / 2
    r = s / 4
    if control.part == PART_TOGGLE:
        # Eye: open circle when children are shown, dash when hidden
        gc.SetBrush(wx.Brush(color))
        if control.active:
            gc.DrawEllipse(cx - r / 2, cy - r / 2, r, r)
        else:
            gc.StrokeLine(cx - r, cy, cx + r, cy)
        return

    # Plus
    gc.StrokeLine(cx - r, cy, cx + r, cy)
    gc.StrokeLine(cx, cy - r, cx, cy + r)

def paint_scene(view, gc: wx.GraphicsContext, scene: Scene, hover: Optional[Hit] = None) -> None:
    """
    Draw a placed flowchart. The node being edited is skipped; the inline
    editor's TextCtrl sits on top of it.
    """
    paint_segments(gc, scene)

    for box in scene.boxes:
        if box.editing and view.editor.active:
            continue
        _paint_box(view, gc, box)

    for control in scene.controls:
        hovered = hover is not None and hover == Hit(control.node_id, control.part)
        _paint_control(view, gc, control, hovered)
