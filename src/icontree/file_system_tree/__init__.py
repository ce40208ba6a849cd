"""Filesystem classification and tree rendering.

This package classifies filesystem entries, resolves their icons and renders
directory hierarchies as box-drawing trees, with depth limits, filtering and
overview truncation.
"""
