"""Page template rendering."""
