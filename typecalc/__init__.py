"""TypeCalc.

A single-pass front end for a small typed calculator language. Source text is
lexed, parsed, checked and evaluated in one pass; there is no syntax tree.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
