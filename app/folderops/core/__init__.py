"""Configuration, paths, and logging setup for folderops."""
