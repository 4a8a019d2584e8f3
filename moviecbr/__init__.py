"""Movie similarity finder: similarity measures, movie records, browsing state and a Tkinter window."""

__version__ = "0.1.0"

__all__ = ["cbr", "movie", "app", "gui"]