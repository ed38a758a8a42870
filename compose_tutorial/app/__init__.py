"""Application composition layer for the Tkinter GUI.

The composition root in ``main.py`` wires Tk views to view-models; views
render models and forward events, view-models own the state.
"""
