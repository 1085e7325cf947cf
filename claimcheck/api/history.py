# claimcheck/api/history.py

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from claimcheck.api.deps import CurrentUser, get_current_user
from claimcheck.core import history
from claimcheck.database import get_db


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["history"])


@router.get("/search-history")
def list_search_history(db: Session = Depends(get_db), current_user: CurrentUser = Depends(get_current_user)):
    try:
        entries = history.list_recent(db, current_user.id)
        return {"success": True, "history": [entry.to_dict() for entry in entries]}
    except Exception:
        logger.exception("Search history error")
        return JSONResponse(status_code=500, content={"success": False, "message": "Failed to fetch search history"})


@router.delete("/search-history")
def clear_search_history(db: Session = Depends(get_db), current_user: CurrentUser = Depends(get_current_user)):
    try:
        deleted = history.clear_all(db, current_user.id)
        return {"success": True, "message": "Search history cleared", "deletedCount": deleted}
    except Exception:
        logger.exception("Clear history error")
        return JSONResponse(status_code=500, content={"success": False, "message": "Failed to clear search history"})
