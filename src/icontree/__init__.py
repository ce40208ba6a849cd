"""Directory tree visualization with file-type icons.

This package renders a directory hierarchy as a box-drawing tree, annotating
every entry with an icon glyph derived from its name, extension or file type.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("icontree")
except PackageNotFoundError:
    __version__ = "unknown"
