"""User interfaces for pathext."""
