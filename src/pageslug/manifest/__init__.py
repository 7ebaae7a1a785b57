"""Fingerprint manifest: slug stripping, newest-wins resolution, lookups."""
