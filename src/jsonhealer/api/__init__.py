"""REST API for JSON Healer."""
