"""
TUI Diff Workbench.

A Textual-based terminal UI for typing two texts side by side and
comparing them with a colorized, width-wrapped diff.

Usage:
    python -m textdiff.tui.app --granularity char

Components:
    - DiffWorkbenchApp: Main application class
    - WorkbenchScreen: Input panes, result pane and diff message area
    - Workbench: Focus and compare state machine driving the screen
    - TextPane / DiffView: Pane and message area widgets
"""
