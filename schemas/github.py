from pydantic import BaseModel, Field
from typing import Any, List, Optional

class GitHubUserSummary(BaseModel):
    public_repo_count: int = Field(0, validation_alias="public_repos")
    follower_count: int = Field(0, validation_alias="followers")
    following_count: int = Field(0, validation_alias="following")
    created_at: Optional[str] = None

    class Config:
        populate_by_name = True

class GitHubRepoSummary(BaseModel):
    name: str
    description: Optional[str] = None
    url: str = Field(validation_alias="html_url")
    primary_language: Optional[str] = Field(None, validation_alias="language")
    star_count: int = Field(0, validation_alias="stargazers_count")
    fork_count: int = Field(0, validation_alias="forks_count")
    updated_at: Optional[str] = None

    class Config:
        populate_by_name = True

class GitHubStats(BaseModel):
    repos: int = 0
    stars: int = 0
    forks: int = 0
    followers: int = 0

class GitHubStatsView(BaseModel):
    stats: GitHubStats
    featured_projects: List[GitHubRepoSummary]
    is_loading: bool = False
    error: Optional[str] = None

class QueryState(BaseModel):
    """One fetch as seen by the page: its data, whether it is in flight, and its error."""
    data: Optional[Any] = None
    is_loading: bool = False
    error: Optional[str] = None
