"""LabelMaker - send label text to a network label printer.

LabelMaker is a small front-end for a label-printer HTTP endpoint. Type the
label text, pick how many copies to print, and send it. Labels that printed
successfully are kept in a short history for quick reuse.

Usage:
    labelmaker configure --endpoint https://printer.local/print --token TOKEN
    labelmaker print "Spices: cumin" --qty 2
    labelmaker history
    labelmaker gui
"""

__version__ = "0.1.0"
