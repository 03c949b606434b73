"""Endpoints for direct messaging between users."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from agrilink.application.use_cases.messages import (
    MessagingNotAllowedError,
    RecipientNotFoundError,
    count_unread_messages,
    get_conversation,
    list_conversations,
    send_message,
)
from agrilink.domain.entities import User
from agrilink.infrastructure.database import get_db
from agrilink.infrastructure.repositories import UserRepository
from agrilink.interfaces.api.dependencies import get_current_user, get_optional_user
from agrilink.interfaces.api.schemas import (
    ConversationListRead,
    ConversationRead,
    MessageCreate,
    MessageRead,
    MessageThreadRead,
    UnreadCountRead,
    UserSummaryRead,
)

router = APIRouter(prefix="/messages", tags=["messages"])


def _thread_for(db: Session, current_user: User, peer_id: int) -> MessageThreadRead:
    messages = get_conversation(db, user_id=current_user.id, peer_id=peer_id)
    return MessageThreadRead(
        messages=[MessageRead.model_validate(message) for message in messages]
    )


@router.get("/unread", response_model=UnreadCountRead)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> UnreadCountRead:
    """Return the unread badge count; anonymous callers simply get ``0``."""

    user_id = current_user.id if current_user is not None else None
    return UnreadCountRead(unread_count=count_unread_messages(db, user_id))


@router.get("/", response_model=ConversationListRead | MessageThreadRead)
def read_conversations(
    user_id: int | None = Query(
        None, description="Return the thread with this user instead of the list"
    ),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ConversationListRead | MessageThreadRead:
    """List the caller's conversations, most recently active first.

    With ``user_id`` the thread with that user is returned and marked read.
    """

    if user_id is not None:
        return _thread_for(db, current_user, user_id)

    conversations = list_conversations(db, user_id=current_user.id)
    peers = UserRepository(db).get_map_by_ids([c.peer_id for c in conversations])
    return ConversationListRead(
        conversations=[
            ConversationRead(
                user=(
                    UserSummaryRead.model_validate(peers[conversation.peer_id])
                    if conversation.peer_id in peers
                    else None
                ),
                last_message=(
                    MessageRead.model_validate(conversation.last_message)
                    if conversation.last_message is not None
                    else None
                ),
                unread_count=conversation.unread_count,
            )
            for conversation in conversations
        ]
    )


@router.get("/{peer_id}", response_model=MessageThreadRead)
def read_thread(
    peer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageThreadRead:
    """Return the thread with ``peer_id`` and mark incoming messages as read."""

    return _thread_for(db, current_user, peer_id)


@router.post("/", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
def create_message(
    payload: MessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageRead:
    """Send a message to another user."""

    try:
        message = send_message(
            db,
            sender=current_user,
            receiver_id=payload.receiver_id,
            content=payload.content,
        )
    except RecipientNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except MessagingNotAllowedError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return MessageRead.model_validate(message)
