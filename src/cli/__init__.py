"""Command-line interface.

This module wires argparse commands onto the asset filesystem.
It generates asset modules and reads assets for inspection.
"""
