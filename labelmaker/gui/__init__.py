"""Tkinter front-end for LabelMaker."""
