"""Pydantic models describing locale payloads."""

from typing import Any

from agrilink.infrastructure.i18n import Locale

from .base import APIModel


class LocaleRead(APIModel):
    locale: Locale
    messages: dict[str, Any]


class LocaleOption(APIModel):
    code: Locale
    name: str


class LocaleUpdate(APIModel):
    locale: Locale


class LocaleUpdateResponse(APIModel):
    locale: Locale
    reload: bool = True
