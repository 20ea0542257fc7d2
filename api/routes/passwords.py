"""
Password Generation API Routes.

Endpoints:
- POST /api/generate-passwords - Generate and hash a batch of passwords
- GET  /api/passwords          - List persisted passwords
- GET  /api/passwords/{id}     - Get one persisted password
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from typing import List, Optional
import logging

from api.dependencies import get_app_settings, get_batch_generator, get_password_store
from core.config import Settings
from core.interfaces import IPasswordStore
from core.models import StoredPassword
from core.passwords import (
    PasswordBatchGenerator,
    InvalidRequestError,
    PasswordGenerationError,
)
from core.passwords.models import (
    GeneratePasswordsRequest,
    GeneratePasswordsResponse,
    StoredPasswordModel,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["passwords"])


@router.post(
    "/generate-passwords",
    response_model=GeneratePasswordsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_passwords(
    body: GeneratePasswordsRequest,
    settings: Settings = Depends(get_app_settings),
    batch_generator: PasswordBatchGenerator = Depends(get_batch_generator),
    password_store: Optional[IPasswordStore] = Depends(get_password_store),
):
    """
    Generate passwords and their bcrypt hashes.

    Omitted fields take the configured defaults. Out-of-range values are
    rejected with the offending fields listed.
    """
    domain_request = body.to_domain(settings.defaults)

    try:
        # bcrypt is CPU bound; keep it off the event loop
        result = await run_in_threadpool(batch_generator.generate_batch, domain_request)
    except InvalidRequestError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Invalid input data",
                "errors": [
                    {"field": err["field"], "message": err["message"]}
                    for err in e.errors
                ],
            },
        )
    except PasswordGenerationError as e:
        logger.error(f"[PASSWORDS] Error generating passwords: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Failed to generate passwords", "errors": []},
        )

    if password_store is not None:
        entries = [
            StoredPassword(plaintext=entry.password, hash=entry.hash)
            for entry in result.passwords
        ]
        try:
            await password_store.save_passwords(entries)
        except Exception as e:
            logger.error(f"[PASSWORDS] Error storing passwords: {e}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": "Failed to store passwords", "errors": []},
            )

    return GeneratePasswordsResponse.from_result(result)


@router.get("/passwords", response_model=List[StoredPasswordModel])
async def list_passwords(
    password_store: Optional[IPasswordStore] = Depends(get_password_store),
):
    """List persisted passwords (empty when persistence is disabled)."""
    if password_store is None:
        return []
    stored = await password_store.get_passwords()
    return [StoredPasswordModel(**entry.to_dict()) for entry in stored]


@router.get("/passwords/{password_id}", response_model=StoredPasswordModel)
async def get_password(
    password_id: int,
    password_store: Optional[IPasswordStore] = Depends(get_password_store),
):
    """Get one persisted password."""
    entry = await password_store.get_password(password_id) if password_store else None
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Password not found"
        )
    return StoredPasswordModel(**entry.to_dict())
