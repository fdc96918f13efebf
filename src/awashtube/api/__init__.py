"""Local JSON API for awashtube."""
