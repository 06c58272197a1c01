"""Implementation modules for cooperative cancellation."""
