"""Terminal UI for mushaf.

The browsing logic (filtering, focus, load and view state) lives in plain
modules that never touch Textual; app.py and the widgets render snapshots
of that state.
"""
