"""pageslug — resolve fingerprinted build assets and render the pages that use them."""

__version__ = "0.1.0"
