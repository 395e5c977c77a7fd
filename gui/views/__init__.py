"""Views mounted in the root window."""
