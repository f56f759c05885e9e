"""Services computed on top of the repositories."""
