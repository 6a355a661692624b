"""
Server modules for the Babysquares application.

This package contains the FastAPI routers serving the board page, the htmx
square and settings fragments, and the health check.
"""
