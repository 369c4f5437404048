"""
Idea generation API endpoints.

Routes:
- POST /ideas/jobs - Submit unused comments as a new job
- POST /ideas/jobs/reconcile - Poll in-flight jobs and store finished results
- GET /ideas/jobs/pending - Whether any job is still in flight
- GET /ideas - List generated ideas, newest first
- GET /ideas/detail - Source video title and comment text for an idea

Dependencies: ideaforge.application.services, ideaforge.models
System role: Idea generation HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from ideaforge.api.deps import get_current_user_id, get_idea_coordinator
from ideaforge.api.routers.router_utils import handle_idea_errors
from ideaforge.application.services import IdeaCoordinator
from ideaforge.models.idea import IdeaDetailResponse, IdeaResponse
from ideaforge.models.job import JobResponse, PendingResponse, ReconcileSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ideas", tags=["ideas"])


@router.post("/jobs", response_model=JobResponse, status_code=201)
@handle_idea_errors
async def kickoff_job(
    user_id: str | None = Depends(get_current_user_id),
    coordinator: IdeaCoordinator = Depends(get_idea_coordinator),
) -> JobResponse:
    """
    Submit the caller's oldest unused comments for idea generation.

    Returns:
        JobResponse: Created job (job_state=STARTED, processed=false)

    Raises:
        HTTPException(401): No user identity
        HTTPException(409): No unused comments
        HTTPException(502): Remote service rejected the job
    """
    job = await coordinator.kickoff(user_id)
    return JobResponse.model_validate(job)


@router.post("/jobs/reconcile", response_model=ReconcileSummary)
@handle_idea_errors
async def reconcile_jobs(
    user_id: str | None = Depends(get_current_user_id),
    coordinator: IdeaCoordinator = Depends(get_idea_coordinator),
) -> ReconcileSummary:
    """
    Poll the caller's in-flight jobs and persist finished results.

    Per-job failures are reported in the summary, not as an error status.
    """
    return await coordinator.reconcile(user_id)


@router.get("/jobs/pending", response_model=PendingResponse)
@handle_idea_errors
async def has_pending_jobs(
    user_id: str | None = Depends(get_current_user_id),
    coordinator: IdeaCoordinator = Depends(get_idea_coordinator),
) -> PendingResponse:
    """Report whether the caller has unprocessed, non-terminal jobs."""
    return PendingResponse(has_pending=await coordinator.has_pending(user_id))


@router.get("", response_model=list[IdeaResponse])
@handle_idea_errors
async def list_ideas(
    user_id: str | None = Depends(get_current_user_id),
    coordinator: IdeaCoordinator = Depends(get_idea_coordinator),
) -> list[IdeaResponse]:
    """List the caller's ideas, most recently created first."""
    ideas = await coordinator.get_ideas(user_id)
    return [IdeaResponse.model_validate(idea) for idea in ideas]


@router.get("/detail", response_model=IdeaDetailResponse)
@handle_idea_errors
async def get_idea_detail(
    video_id: UUID = Query(..., description="Source video of the idea"),
    comment_id: UUID = Query(..., description="Source comment of the idea"),
    user_id: str | None = Depends(get_current_user_id),
    coordinator: IdeaCoordinator = Depends(get_idea_coordinator),
) -> IdeaDetailResponse:
    """
    Resolve the source video title and comment text of an idea.

    Missing rows yield "Video not found" / "Comment not found" rather
    than a 404.
    """
    return await coordinator.get_idea_detail(user_id, video_id, comment_id)
