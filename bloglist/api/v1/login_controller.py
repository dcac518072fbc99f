# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.auth_dto import UserLoginRequest, LoginResponse
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import get_container


router = APIRouter(tags=["authentication"])


@router.post("", response_model=LoginResponse)
async def login_user(request: UserLoginRequest) -> LoginResponse:
    """
    Authenticate user and get a bearer token

    Args:
        request: User login request

    Returns:
        LoginResponse with token, username and name
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(request)
