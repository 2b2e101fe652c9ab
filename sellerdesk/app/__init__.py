"""Application composition layer for the Tkinter GUI.

Controllers in this package wire form dialogs, list views, view models,
use cases, and services into runnable desktop workflows without placing
validation or persistence logic in views.
"""
