"""Identity exchange adapters."""

from src.infrastructure.identity.iam_token_exchange import IamTokenExchange

__all__ = ["IamTokenExchange"]
