"""Tkinter front-end for CoinPeek.

Widget modules import tkinter at module scope; `gui.app`, `gui.state` and
`gui.services` stay importable without a display server so the test suite can
exercise startup headlessly.
"""
