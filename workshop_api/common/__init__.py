"""Process-wide settings and logging helpers."""
