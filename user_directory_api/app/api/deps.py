"""
Request dependencies shared by API endpoints.

Services are constructed once in ``create_app`` and stored on
``app.state``; these helpers hand them to route functions via
``Depends``.
"""

from fastapi import Request

from user_directory_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` wired into the running application."""
    return request.app.state.user_service
