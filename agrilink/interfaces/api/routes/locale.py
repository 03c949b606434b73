"""Endpoints for reading and switching the interface language."""

from fastapi import APIRouter, Depends, Response

from agrilink.infrastructure.i18n import (
    LOCALE_NAMES,
    ResolvedLocale,
    build_locale_cookie,
)
from agrilink.interfaces.api.dependencies import get_request_locale
from agrilink.interfaces.api.schemas import (
    LocaleOption,
    LocaleRead,
    LocaleUpdate,
    LocaleUpdateResponse,
)

router = APIRouter(prefix="/locale", tags=["locale"])


@router.get("/", response_model=LocaleRead)
def read_locale(resolved: ResolvedLocale = Depends(get_request_locale)) -> LocaleRead:
    """Return the locale negotiated from the cookie and its message bundle."""

    return LocaleRead(locale=resolved.locale, messages=resolved.messages)


@router.get("/available", response_model=list[LocaleOption])
def read_available_locales() -> list[LocaleOption]:
    return [LocaleOption(code=code, name=name) for code, name in LOCALE_NAMES.items()]


@router.put("/", response_model=LocaleUpdateResponse)
def update_locale(payload: LocaleUpdate, response: Response) -> LocaleUpdateResponse:
    """Persist the chosen locale in the cookie; the client reloads afterwards."""

    cookie = build_locale_cookie(payload.locale)
    response.set_cookie(
        key=cookie.key,
        value=cookie.value,
        max_age=cookie.max_age,
        path=cookie.path,
        samesite=cookie.samesite,
    )
    return LocaleUpdateResponse(locale=payload.locale, reload=True)
