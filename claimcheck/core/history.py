# claimcheck/core/history.py

import logging
from sqlalchemy.orm import Session
from claimcheck.models import SearchHistory


logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 500
DEFAULT_LIMIT = 50


def append(db: Session, user_id: int, text: str, analysis: str) -> SearchHistory:
    """Records one analyze request; the claim text is cut to MAX_TEXT_LENGTH characters."""
    entry = SearchHistory(user_id=user_id, text=text[:MAX_TEXT_LENGTH], analysis=analysis)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def list_recent(db: Session, user_id: int, limit: int = DEFAULT_LIMIT) -> list[SearchHistory]:
    return (
        db.query(SearchHistory)
        .filter(SearchHistory.user_id == user_id)
        .order_by(SearchHistory.created_at.desc(), SearchHistory.id.desc())
        .limit(limit)
        .all()
    )


def clear_all(db: Session, user_id: int) -> int:
    deleted = (
        db.query(SearchHistory)
        .filter(SearchHistory.user_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info("Cleared %d history entries for user id=%s", deleted, user_id)
    return deleted
