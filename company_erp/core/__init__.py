"""Core infrastructure: exceptions, logging, middleware, security."""
