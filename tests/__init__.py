"""Test suite for the Lockbox console API.

Test structure:
- unit/: Unit tests - domain logic, services, adapters in isolation
- api/: API endpoint tests - HTTP request/response cycle with stub handlers

Upstream HTTP is mocked with pytest-httpx; no test talks to a real cloud.
"""
