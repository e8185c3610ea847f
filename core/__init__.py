"""Shared configuration, path and file I/O helpers."""
