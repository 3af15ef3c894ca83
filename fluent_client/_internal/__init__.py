"""Internal modules for the fluent client.

WARNING: This package is not part of the public API.

Modules:
    resolver - Client nodes and attribute/call resolution
    dispatch - Request dispatch, payload casing and option models
    http - httpx transports and default transport discovery
    debug - Debug logging to stderr
"""
