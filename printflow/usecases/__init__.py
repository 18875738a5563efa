"""Use-case layer for orchestrating the print-files workflow.

Each module coordinates domain objects and ports without performing widget
work directly, preserving MVVM + Hexagonal boundaries.
"""
