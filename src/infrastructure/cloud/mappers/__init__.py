"""Upstream JSON -> domain entity mappers."""

from src.infrastructure.cloud.mappers.operation_mapper import OperationMapper
from src.infrastructure.cloud.mappers.resource_mapper import ResourceMapper
from src.infrastructure.cloud.mappers.secret_mapper import SecretMapper
from src.infrastructure.cloud.mappers.timestamps import parse_timestamp

__all__ = ["OperationMapper", "ResourceMapper", "SecretMapper", "parse_timestamp"]
