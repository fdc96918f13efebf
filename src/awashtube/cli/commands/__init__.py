"""Command groups registered on the main awashtube CLI."""
