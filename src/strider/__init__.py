"""
Strider - a keyboard-driven terminal directory browser.

Walk the filesystem with vim or arrow keys and print the directory you
settle on, so a shell wrapper can cd into it.

Created: 2026-10-19
"""

__version__ = "0.1.0"
__author__ = "Ryan Young"
