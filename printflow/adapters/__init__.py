"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (filesystem catalog,
    settings storage, and display test doubles) used by use cases.

Dependencies:
    Individual submodules depend on filesystem APIs and domain protocol
    definitions only. The Tkinter display lives in the app layer.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests (for
    doubles and filesystem behavior verification).
"""
