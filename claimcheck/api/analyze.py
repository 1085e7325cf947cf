# claimcheck/api/analyze.py

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from claimcheck.api.deps import CurrentUser, get_analyze_user, get_analyzer
from claimcheck.core import history
from claimcheck.core.analyzer import Analyzer
from claimcheck.schemas import AnalyzeRequest, AnalyzeResponse


logger = logging.getLogger(__name__)

router = APIRouter(tags=["analyze"])


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(
    req: AnalyzeRequest,
    request: Request,
    analyzer: Analyzer = Depends(get_analyzer),
    current_user: CurrentUser | None = Depends(get_analyze_user),
):
    try:
        analysis = analyzer.analyze(req.text)

        if current_user is not None:
            with request.app.state.session_factory() as db:
                history.append(db, current_user.id, req.text, analysis)

        return {"analysis": analysis}
    except Exception:
        logger.exception("Analyze error")
        return JSONResponse(status_code=500, content={"error": "Failed to analyze text"})
