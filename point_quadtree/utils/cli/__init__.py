"""Development CLI helpers."""
