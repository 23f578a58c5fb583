"""Flask web frontend for the autocorrect engine (see web.py)."""
