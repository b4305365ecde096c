import logging

from fastapi import APIRouter, Depends, Path, Query, status

from core.config import Settings
from core.dependencies import get_github_service, get_settings
from core.errors import error_response
from schemas.contact import ErrorResponse, ValidationErrorResponse
from schemas.github import GitHubStatsView
from services.github_service import REPO_SORT_OPTIONS, GitHubAPIError, GitHubService
from services.github_stats import load_github_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/github", tags=["github"])

# GitHub logins: alphanumerics and hyphens, no leading hyphen, at most 39 chars
USERNAME_PATTERN = r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})$"

SORT_PATTERN = "^(" + "|".join(REPO_SORT_OPTIONS) + ")$"

ERROR_RESPONSES = {
    400: {"model": ValidationErrorResponse},
    500: {"model": ErrorResponse},
}

@router.get("/{username}", responses=ERROR_RESPONSES)
async def get_github_user(
    username: str = Path(..., pattern=USERNAME_PATTERN),
    service: GitHubService = Depends(get_github_service),
    settings: Settings = Depends(get_settings),
):
    try:
        return await service.get_user(username)
    except GitHubAPIError as e:
        logger.error(f"GitHub user lookup failed for {username}: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, settings.GITHUB_USER_ERROR_MESSAGE)

@router.get("/{username}/repos", responses=ERROR_RESPONSES)
async def get_github_repos(
    username: str = Path(..., pattern=USERNAME_PATTERN),
    sort: str = Query("updated", pattern=SORT_PATTERN),
    per_page: int = Query(100, ge=1, le=100),
    service: GitHubService = Depends(get_github_service),
    settings: Settings = Depends(get_settings),
):
    try:
        return await service.get_repos(username, sort=sort, per_page=per_page)
    except GitHubAPIError as e:
        logger.error(f"GitHub repo listing failed for {username}: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, settings.GITHUB_REPOS_ERROR_MESSAGE)

@router.get("/{username}/stats", response_model=GitHubStatsView, responses=ERROR_RESPONSES)
async def get_github_stats(
    username: str = Path(..., pattern=USERNAME_PATTERN),
    service: GitHubService = Depends(get_github_service),
    settings: Settings = Depends(get_settings),
):
    view = await load_github_stats(service, username, settings)
    if view.error:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, view.error)
    return view
