"""Exercise Tracker — users and their logged exercises over HTTP."""

__version__ = "1.0.0"
