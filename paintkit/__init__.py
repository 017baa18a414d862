"""Paint-style drawing toolkit: an in-memory window, figure drawing and queued click and key input."""

__version__ = "0.1.0"