"""
NZWalks Backend — Middleware Package
=====================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first so every later log line can carry it
    2. Logging wraps everything below it, so the duration it records covers
       compression and the handler
"""
