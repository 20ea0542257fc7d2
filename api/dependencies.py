"""
FastAPI dependencies for the password routes.

Each app built by `create_app` keeps its own settings, orchestrator and
optional store on `app.state`; handlers reach them only through these.
"""

from fastapi import Request
from typing import Optional

from core.config import Settings
from core.interfaces import IPasswordStore
from core.passwords import PasswordBatchGenerator


def get_app_settings(request: Request) -> Settings:
    """Settings of the app serving this request"""
    return request.app.state.settings


def get_batch_generator(request: Request) -> PasswordBatchGenerator:
    """Batch orchestrator of the app serving this request"""
    return request.app.state.batch_generator


def get_password_store(request: Request) -> Optional[IPasswordStore]:
    """Password store of the app serving this request, if persistence is on"""
    return request.app.state.password_store
