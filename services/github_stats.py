import asyncio
import logging
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from core.config import Settings
from schemas.github import (
    GitHubRepoSummary,
    GitHubStats,
    GitHubStatsView,
    GitHubUserSummary,
    QueryState,
)
from services.github_service import GitHubAPIError, GitHubService

logger = logging.getLogger(__name__)

FEATURED_PROJECT_LIMIT = 6

REPO_LIST = TypeAdapter(List[GitHubRepoSummary])


def summarize_repos(repos: Optional[List[dict[str, Any]]]) -> List[GitHubRepoSummary]:
    return [GitHubRepoSummary.model_validate(repo) for repo in repos or []]


def featured_projects(repos: List[GitHubRepoSummary], limit: int = FEATURED_PROJECT_LIMIT) -> List[GitHubRepoSummary]:
    """Repos with at least one star or fork, in upstream order."""
    return [repo for repo in repos if repo.star_count > 0 or repo.fork_count > 0][:limit]


def aggregate_stats(user: QueryState, repos: QueryState, limit: int = FEATURED_PROJECT_LIMIT) -> GitHubStatsView:
    """Combine the profile and repo-list fetches into one view.

    Missing data counts as zero, so a half-loaded page still renders.
    """
    profile = GitHubUserSummary.model_validate(user.data) if user.data else None
    repo_list = summarize_repos(repos.data)

    stats = GitHubStats(
        repos=profile.public_repo_count if profile else 0,
        stars=sum(repo.star_count for repo in repo_list),
        forks=sum(repo.fork_count for repo in repo_list),
        followers=profile.follower_count if profile else 0,
    )
    return GitHubStatsView(
        stats=stats,
        featured_projects=featured_projects(repo_list, limit),
        is_loading=user.is_loading or repos.is_loading,
        error=user.error or repos.error,
    )


async def load_github_stats(
    service: GitHubService,
    username: str,
    settings: Optional[Settings] = None,
) -> GitHubStatsView:
    settings = settings or service.settings
    user_result, repos_result = await asyncio.gather(
        service.get_user(username),
        service.get_repos(username),
        return_exceptions=True,
    )

    def to_state(result, validate, message: str) -> QueryState:
        if isinstance(result, GitHubAPIError):
            return QueryState(error=message)
        if isinstance(result, BaseException):
            raise result
        # a 200 with an unexpected body counts as a failed fetch
        try:
            validate(result)
        except ValidationError as e:
            logger.error(f"Unexpected GitHub payload for {username}: {e.error_count()} validation errors")
            return QueryState(error=message)
        return QueryState(data=result)

    return aggregate_stats(
        to_state(user_result, GitHubUserSummary.model_validate, settings.GITHUB_USER_ERROR_MESSAGE),
        to_state(repos_result, REPO_LIST.validate_python, settings.GITHUB_REPOS_ERROR_MESSAGE),
    )
