"""Presentation layer - HTTP endpoints and HTTP concerns.

Routers are thin: they build a command, dispatch it to its handler and
translate the Result into an HTTP response. No business logic lives here.
"""
