"""ASGI plumbing: request dispatch and response sending."""
