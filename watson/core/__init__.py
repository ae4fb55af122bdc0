"""Implementation package for watson (internal; import from ``watson``)."""
