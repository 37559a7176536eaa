"""Hello REST API: three static informational endpoints."""
