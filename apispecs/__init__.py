"""Collect generated OpenAPI/Swagger specs into the API docs site."""
