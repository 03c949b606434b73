"""Use case for updating the editable profile fields of a user."""

from dataclasses import replace

from sqlalchemy.orm import Session

from agrilink.domain.entities import User
from agrilink.infrastructure.i18n import Locale
from agrilink.infrastructure.repositories import UserRepository
from agrilink.utils import now_in_app_timezone

_UNSET = object()


def update_profile(
    session: Session,
    *,
    user_id: int,
    full_name: str | None = None,
    phone: str | None = None,
    profile_image: str | None | object = _UNSET,
    language: Locale | str | None = None,
) -> User:
    """Apply the provided values to the profile of ``user_id``.

    ``profile_image=None`` removes the stored image; omitting it keeps it.
    """

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise ValueError("User not found")

    updated_user = replace(
        current_user,
        full_name=full_name if full_name is not None else current_user.full_name,
        phone=phone if phone is not None else current_user.phone,
        profile_image=(
            current_user.profile_image if profile_image is _UNSET else profile_image
        ),
        language=Locale(language).value if language is not None else current_user.language,
        updated_at=now_in_app_timezone(),
    )
    return repository.update(updated_user)
