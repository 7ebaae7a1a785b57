"""Content-hash renaming."""
