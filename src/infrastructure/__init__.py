"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Upstream cloud API clients (Lockbox, Resource Manager, KMS)
- Identity token exchange
- Encrypted cookie session store
- Structured logging

Structure:
- cloud/: Authenticated gateway, API clients and JSON mappers
- identity/: Long-lived credential -> access token exchange
- session/: Cookie-backed credential store
- security/: AES-GCM cookie sealing
- logging/: structlog configuration and logger adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
