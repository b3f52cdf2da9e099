"""ASGI plumbing — request handling, error mapping, response sending."""
