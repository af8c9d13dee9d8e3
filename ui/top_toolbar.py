from __future__ import annotations
import wx

TRUNCATE_OFF_LABEL = "Truncate Long Text"
TRUNCATE_ON_LABEL = "Show Full Text"

class TopToolbar(wx.Panel):
    """
    Simple top toolbar with a vertical gradient background.
    Holds the truncate-long-text toggle.
    """
    def __init__(self, parent: wx.Window, on_truncate, truncate: bool = False):
        super().__init__(parent, style=wx.BORDER_NONE)
        self._on_truncate = on_truncate

        # Reduce flicker and allow custom paint
        self.SetDoubleBuffered(True)
        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.Bind(wx.EVT_ERASE_BACKGROUND, lambda e: None)
        self.Bind(wx.EVT_PAINT, self._on_paint)

        s = wx.BoxSizer(wx.HORIZONTAL)
        s.AddStretchSpacer(1)

        self._truncate_btn = wx.ToggleButton(self, label=TRUNCATE_OFF_LABEL)
        self._truncate_btn.SetToolTip("Cut labels longer than 20 characters")
        self._truncate_btn.Bind(wx.EVT_TOGGLEBUTTON, self._on_truncate_click)
        s.Add(self._truncate_btn, 0, wx.ALIGN_CENTER_VERTICAL | wx.ALL, 4)

        s.AddStretchSpacer(1)
        self.SetSizer(s)
        self.set_truncate(truncate)

        # Reasonable height
        self.SetMinSize((-1, 40))

    def set_truncate(self, truncate: bool) -> None:
        """Reflect the truncate flag without firing the handler."""
        self._truncate_btn.SetValue(bool(truncate))
        self._truncate_btn.SetLabel(TRUNCATE_ON_LABEL if truncate else TRUNCATE_OFF_LABEL)
        self.Layout()

    def _on_truncate_click(self, _evt):
        if callable(self._on_truncate):
            self._on_truncate(self._truncate_btn.GetValue())

    def _on_paint(self, _evt):
        dc = wx.AutoBufferedPaintDC(self)
        w, h = self.GetClientSize()
        top = wx.Colour(238, 238, 238)
        bot = wx.Colour(208, 208, 208)
        rect = wx.Rect(0, 0, w, h)
        if hasattr(dc, 'GradientFillLinear'):
            dc.GradientFillLinear(rect, top, bot, wx.SOUTH)
        else:
            dc.SetBrush(wx.Brush(top))
            dc.SetPen(wx.Pen(top))
            dc.DrawRectangle(rect)
        line = wx.Colour(180, 180, 180)
        dc.SetPen(wx.Pen(line))
        dc.DrawLine(0, h - 1, w, h - 1)
