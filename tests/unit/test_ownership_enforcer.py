"""
Unit tests for bearer authentication and the ownership check.
"""
import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from bloglist.api.v1.dependencies import get_current_identity
from bloglist.api.v1.error_handlers import register_exception_handlers
from bloglist.application.services.ownership_enforcer import OwnershipEnforcer
from bloglist.di.base_container import BaseContainer
from bloglist.di.container import set_container
from bloglist.domain.exceptions import AuthorizationError, TokenError
from bloglist.domain.models.token import Identity

USER_ID = "665f1c2e9b1e8a3d4c5b6a70"
OTHER_ID = "665f1c2e9b1e8a3d4c5b6a71"


@pytest.fixture
def identity_client(token_authority, mock_user_repo, make_user):
    """Minimal app exposing get_current_identity on GET /whoami"""
    mock_user_repo.find_by_id.return_value = make_user(user_id=USER_ID)
    container = BaseContainer()
    container.register_singleton(OwnershipEnforcer, OwnershipEnforcer(token_authority, mock_user_repo))
    set_container(container)

    application = FastAPI()
    register_exception_handlers(application)

    @application.get("/whoami")
    async def whoami(identity: Identity = Depends(get_current_identity)):
        return {"id": identity.id, "username": identity.username}

    with TestClient(application) as client:
        yield client
    set_container(None)


class TestGetCurrentIdentity:
    """Tests for the bearer dependency"""

    def test_reads_bearer_token(self, identity_client, token_authority):
        token = token_authority.sign(subject_id=USER_ID, username="root")
        response = identity_client.get("/whoami", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json() == {"id": USER_ID, "username": "root"}

    def test_scheme_is_case_insensitive(self, identity_client, token_authority):
        token = token_authority.sign(subject_id=USER_ID, username="root")
        response = identity_client.get("/whoami", headers={"authorization": f"bearer {token}"})
        assert response.status_code == 200

    def test_missing_header(self, identity_client):
        response = identity_client.get("/whoami")
        assert response.status_code == 401
        assert response.json() == {"error": "token missing"}

    @pytest.mark.parametrize("value", ["Basic dXNlcjpwYXNz", "Bearer", "abc.def.ghi"])
    def test_malformed_header(self, identity_client, value):
        response = identity_client.get("/whoami", headers={"Authorization": value})
        assert response.status_code == 401
        assert response.json() == {"error": "token invalid"}

    def test_bearer_scheme_in_openapi(self):
        from bloglist.main import app

        schema = app.openapi()
        assert "HTTPBearer" in schema["components"]["securitySchemes"]
        assert schema["paths"]["/api/blogs"]["post"]["security"] == [{"HTTPBearer": []}]
        assert "security" not in schema["paths"]["/api/blogs"]["get"]


class TestAuthenticate:
    """Tests for OwnershipEnforcer.authenticate"""

    @pytest.mark.asyncio
    async def test_resolves_identity(self, token_authority, mock_user_repo, make_user):
        mock_user_repo.find_by_id.return_value = make_user(user_id=USER_ID)
        enforcer = OwnershipEnforcer(token_authority, mock_user_repo)
        token = token_authority.sign(subject_id=USER_ID, username="root")

        identity = await enforcer.authenticate(token)

        assert identity == Identity(id=USER_ID, username="root")
        mock_user_repo.find_by_id.assert_awaited_once_with(USER_ID)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "   "])
    async def test_missing_token_skips_store(self, token_authority, mock_user_repo, token):
        enforcer = OwnershipEnforcer(token_authority, mock_user_repo)
        with pytest.raises(TokenError, match="token missing"):
            await enforcer.authenticate(token)
        mock_user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_garbage_token(self, token_authority, mock_user_repo):
        enforcer = OwnershipEnforcer(token_authority, mock_user_repo)
        with pytest.raises(TokenError, match="token invalid"):
            await enforcer.authenticate("abc.def.ghi")

    @pytest.mark.asyncio
    async def test_expired_token(self, token_authority, mock_user_repo):
        enforcer = OwnershipEnforcer(token_authority, mock_user_repo)
        token = token_authority.sign(subject_id=USER_ID, username="root", ttl_seconds=-5)
        with pytest.raises(TokenError, match="token expired"):
            await enforcer.authenticate(token)

    @pytest.mark.asyncio
    async def test_unknown_subject_is_invalid(self, token_authority, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        enforcer = OwnershipEnforcer(token_authority, mock_user_repo)
        token = token_authority.sign(subject_id=USER_ID, username="root")
        with pytest.raises(TokenError, match="token invalid"):
            await enforcer.authenticate(token)


class TestAuthorizeMutation:
    """Tests for OwnershipEnforcer.authorize_mutation"""

    def test_owner_passes(self, make_blog):
        OwnershipEnforcer.authorize_mutation(Identity(id=USER_ID, username="root"), make_blog(owner=USER_ID))

    def test_other_user_rejected(self, make_blog):
        with pytest.raises(AuthorizationError, match="operation not authorized"):
            OwnershipEnforcer.authorize_mutation(
                Identity(id=OTHER_ID, username="mallory"),
                make_blog(owner=USER_ID),
            )

    def test_ownerless_blog_rejected(self, make_blog):
        with pytest.raises(AuthorizationError):
            OwnershipEnforcer.authorize_mutation(Identity(id=USER_ID, username="root"), make_blog(owner=None))
