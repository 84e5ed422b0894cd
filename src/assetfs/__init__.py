"""Embedded asset filesystem.

This module serves generated, compressed assets through a read-only
filesystem view, with a local-disk backing for development mode.
"""
