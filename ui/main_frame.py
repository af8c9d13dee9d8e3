'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

from core.log import Log
from core.flowchart import FlowchartController
from core.tree import count_nodes
from ui.top_toolbar import TopToolbar
from ui.view import FlowchartView

HELP_TEXT = (
    "Double-click a box to rename it (Enter saves, Escape cancels).\n"
    "Click + under a box to add a child.\n"
    "Click the eye left of a box to hide or show its children."
)

class MainFrame(wx.Frame):
    """Main application frame for FlowPad."""
    def __init__(self, verbosity: int = 0, truncate: bool = False):
        super().__init__(None, title="FlowPad", size=(1000, 700))
        self.SetMinSize((600, 400))

        Log.set_verbosity(verbosity)
        self.controller = FlowchartController(truncate=truncate)
        self.view = None

        self._build_menu()
        self.CreateStatusBar()
        self.SetStatusText("Ready.")
        self._build_body()
        self.Bind(wx.EVT_CLOSE, self._on_close)

    # ---------------- Layout ----------------

    def _build_menu(self):
        menubar = wx.MenuBar()

        m_file = wx.Menu()
        m_save_log = m_file.Append(wx.ID_ANY, "Save &Log...")
        m_file.AppendSeparator()
        m_quit = m_file.Append(wx.ID_EXIT, "&Quit\tCtrl+Q")
        menubar.Append(m_file, "&File")

        m_view = wx.Menu()
        self._m_truncate = m_view.AppendCheckItem(wx.ID_ANY, "&Truncate Long Text\tCtrl+T")
        self._m_truncate.Check(self.controller.truncate)
        menubar.Append(m_view, "&View")

        m_help = wx.Menu()
        m_usage = m_help.Append(wx.ID_HELP, "&Usage")
        menubar.Append(m_help, "&Help")

        self.SetMenuBar(menubar)

        self.Bind(wx.EVT_MENU, self.on_save_log, m_save_log)
        self.Bind(wx.EVT_MENU, lambda evt: self.Close(), m_quit)
        self.Bind(wx.EVT_MENU, self.on_menu_truncate, self._m_truncate)
        self.Bind(wx.EVT_MENU, self.on_usage, m_usage)

    def _build_body(self):
        panel = wx.Panel(self)
        s = wx.BoxSizer(wx.VERTICAL)

        self.toolbar = TopToolbar(panel, self.on_truncate, self.controller.truncate)
        s.Add(self.toolbar, 0, wx.EXPAND)

        self.view = FlowchartView(panel, self.controller, on_change=self._on_view_change)
        s.Add(self.view, 1, wx.EXPAND | wx.ALL, 6)

        panel.SetSizer(s)
        self.view.SetFocus()

    # ---------------- Actions ----------------

    def on_truncate(self, truncate: bool):
        """Toolbar toggle and View menu both land here."""
        if self.view is None:
            return
        self.view.set_truncate(truncate)
        self.toolbar.set_truncate(self.controller.truncate)
        self._m_truncate.Check(self.controller.truncate)

    def on_menu_truncate(self, _evt=None):
        self.on_truncate(self._m_truncate.IsChecked())

    def on_usage(self, _evt=None):
        wx.MessageBox(HELP_TEXT, "FlowPad Usage", wx.OK | wx.ICON_INFORMATION, self)

    def on_save_log(self, _evt=None):
        with wx.FileDialog(
            self, "Save log", wildcard="Text files (*.txt)|*.txt",
            style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT,
        ) as dlg:
            if dlg.ShowModal() != wx.ID_OK:
                return
            path = dlg.GetPath()

        if Log.write_to_file(path):
            self.SetStatusText(f"Log saved to {path}")
        else:
            self.SetStatusText(f"Could not save log to {path}")

    def _on_view_change(self):
        if self.view is None:
            return
        nodes = count_nodes(self.controller.tree)
        mode = "truncated" if self.controller.truncate else "full text"
        self.SetStatusText(f"{nodes} node{'s' if nodes != 1 else ''}, {mode}")

    def _on_close(self, evt):
        # Finish any open edit so nothing typed is silently dropped
        if self.view is not None and self.view.editor.active:
            self.view.editor.commit()
        Log.debug("Closing FlowPad", 1)
        evt.Skip()
