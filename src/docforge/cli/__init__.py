# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Click command-line interface of DocForge."""
