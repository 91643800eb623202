"""Dependency injection for FastAPI endpoints"""

from typing import Sequence
from fastapi import Request

from bank_readiness.domain.catalog import BANK_CATALOG
from bank_readiness.domain.models import BankProfile


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_catalog() -> Sequence[BankProfile]:
    """Provide the bank profile catalog used for ranking"""
    return BANK_CATALOG
