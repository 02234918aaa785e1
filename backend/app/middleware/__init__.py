# Middleware package init
"""
Notes API - Middleware Package
===============================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so every log line of the request, including the
    access log written on the way out, carries the same correlation ID.
"""
