"""Cross-cutting configuration and logging helpers."""
