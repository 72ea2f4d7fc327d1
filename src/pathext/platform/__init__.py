"""Platform integrations (logging) shared across pathext layers."""
