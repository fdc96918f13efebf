"""Request and response schemas for the awashtube API."""
