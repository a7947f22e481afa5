"""
Editing limits and reference-data conventions for the cargo compatibility tool.

Grid bounds follow the stowage plan editor (width across the vessel, length
along it). Column names match the reference workbooks as issued.
"""

from __future__ import annotations

# Tanks across the vessel
MIN_GRID_WIDTH = 2
MAX_GRID_WIDTH = 8
DEFAULT_GRID_WIDTH = 4

# Tank rows along the vessel
MIN_GRID_LENGTH = 4
MAX_GRID_LENGTH = 12
DEFAULT_GRID_LENGTH = 8

# Max chemical search suggestions shown to the operator
SUGGESTION_LIMIT = 10

# Cell value marking a flagged group pair in the compatibility chart
INCOMPATIBLE_MARK = "X"

# Chemical index workbook
COL_CHEMICAL_NAME = "Chemical name"
COL_GROUP_NO = "Group No."
COL_FOOTNOTE = "Footnote"

# Compatibility chart workbook
COL_REACTIVE_GROUP = "REACTIVE GROUP"

# Exception workbooks
COL_EXCEPTION_CHEMICAL = "Chemical Name"
COL_COMPATIBLE_CHEMICAL = "Compatible Chemical Name"
COL_INCOMPATIBLE_GROUP = "Incompatible Group"
