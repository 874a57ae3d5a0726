# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""DocForge package.

DocForge is the command-line driver of an API documentation generator. It
resolves settings, sequences the scan, parse and generate phases of a
pluggable generator backend, and reports progress and failures on the console.
"""

from __future__ import annotations
