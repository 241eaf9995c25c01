# tests/__init__.py
"""
Test suite for the jclaw operator console.

- unit: controllers, gateway, views and models, run against a fake admin API
- factories: Factory Boy payload factories mirroring the admin API JSON
"""
