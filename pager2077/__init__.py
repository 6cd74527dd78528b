"""
pager2077 - A five-button pager messaging client

A Textual TUI that emulates a hardware pager: every screen is driven by
up, down, select, back and menu. Friends are added by their 8-character hex
code, typed digit by digit or pasted from the clipboard.
"""

__version__ = "0.1.0"
