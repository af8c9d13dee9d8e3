'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

# Flowchart geometry, all in rem. The wx view converts with ui.constants.REM_PX.

# Box sizing
MIN_WIDTH = 8
CHAR_WIDTH = 0.7
PADDING = 4
BOX_H = 3

# Label truncation
TRUNCATE_AT = 20
ELLIPSIS = "..."

# Child row
CHILD_SPACING = 14
SPINE_PAD = 6
CHILD_GAP = 3.5

# Vertical stack of a single node
CONNECTOR_ABOVE_H = 3
CONNECTOR_ABOVE_GAP = 0.75
ADD_GAP = 0.75
ADD_SIZE = 2
CHILD_ROW_MARGIN = 1.5
DROP_CONNECTOR_H = 2
TICK_H = 2
TICK_GAP = 1.5

# Eye toggle sits left of the box when the node has children
TOGGLE_SIZE = 1.75
TOGGLE_GAP = 0.5

# Root node
ROOT_ID = "root"
ROOT_LABEL = "Start"
CHILD_LABEL_FMT = "Button {n}"
