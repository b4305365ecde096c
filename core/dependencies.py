from fastapi import Request

from core.config import Settings
from services.contact_store import ContactStore
from services.github_service import GitHubService


# The app factory owns these instances; routes only borrow them.
def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_contact_store(request: Request) -> ContactStore:
    return request.app.state.contact_store

def get_github_service(request: Request) -> GitHubService:
    return request.app.state.github_service
