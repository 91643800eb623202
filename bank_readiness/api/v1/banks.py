"""GET /v1/banks - bank profile catalog"""

from typing import Sequence
from fastapi import APIRouter, Depends, HTTPException

from bank_readiness.api.v1.schemas import BankListResponse, BankProfileSchema
from bank_readiness.api.dependencies import get_catalog
from bank_readiness.domain.catalog import get_bank
from bank_readiness.domain.exceptions import BankNotFoundError
from bank_readiness.domain.models import BankProfile

router = APIRouter()


@router.get("/banks", response_model=BankListResponse)
def list_banks(catalog: Sequence[BankProfile] = Depends(get_catalog)):
    """List catalog banks in catalog order"""
    return BankListResponse(banks=[BankProfileSchema.from_profile(bank) for bank in catalog])


@router.get("/banks/{code}", response_model=BankProfileSchema)
def get_bank_profile(code: str, catalog: Sequence[BankProfile] = Depends(get_catalog)):
    """
    Retrieve one bank profile by code.

    Returns:
        Bank profile, or 404 when the code is not in the catalog
    """
    try:
        bank = get_bank(code, catalog)
    except BankNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return BankProfileSchema.from_profile(bank)
