'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

# Pixels per rem of flowchart geometry
REM_PX = 16
MARGIN_PX = 32

DEFAULT_BG_COLOR = wx.Colour(240, 240, 255)
BOX_COLOR = wx.Colour(99, 102, 241)
BOX_TEXT_COLOR = wx.Colour(255, 255, 255)
LINE_COLOR = wx.Colour(129, 140, 248)
CONTROL_COLOR = wx.Colour(160, 160, 180)
CONTROL_HOVER_COLOR = wx.Colour(34, 197, 94)
