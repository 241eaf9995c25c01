# tests/unit/__init__.py
"""
Unit tests for individual components.

Nothing here touches the network: the admin API is an httpx.MockTransport
driven by the `fake_api` fixture.
"""
