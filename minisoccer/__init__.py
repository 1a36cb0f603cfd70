"""Mini soccer booking backend parts: settings, user model, passwords, JWT guards, seeding and API docs."""

__version__ = "1.0.0"