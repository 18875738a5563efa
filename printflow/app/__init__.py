"""Application composition layer for the Tkinter GUI.

``main.App`` wires views, view models, adapters, and the print-files workflow
into a runnable desktop program without placing workflow logic in views.
"""
