"""API request/response contracts."""
