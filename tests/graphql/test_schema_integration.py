"""
End-to-end tests through the GraphQL schema and the HTTP application
"""

import httpx
import pytest
import pytest_asyncio

from quill.auth.context import ANONYMOUS
from quill.graphql.schema import schema, validate_schema

CREATE_USER = """
mutation CreateUser($email: String!, $name: String!, $password: String!) {
    createUser(userInput: {email: $email, name: $name, password: $password}) {
        _id
        email
        name
        status
        posts { _id }
    }
}
"""

LOGIN = """
query Login($email: String!, $password: String!) {
    login(email: $email, password: $password) { token userId }
}
"""

CREATE_POST = """
mutation CreatePost($title: String!, $content: String!, $imageUrl: String!) {
    createPost(postInput: {title: $title, content: $content, imageUrl: $imageUrl}) {
        _id
        title
        imageUrl
        createdAt
        creator { _id name }
    }
}
"""

POSTS = """
query Posts($page: Int) {
    posts(page: $page) {
        posts { _id title creator { name } }
        totalPosts
    }
}
"""


class TestSchema:
    def test_schema_validates(self):
        validate_schema()

    def test_public_names(self):
        sdl = schema.as_str()

        assert "input UserInputData" in sdl
        assert "input PostInputData" in sdl
        assert "_id: ID!" in sdl
        assert "totalPosts: Int!" in sdl
        assert "password" not in sdl.split("type User")[1].split("}")[0]

    @pytest.mark.asyncio
    async def test_errors_carry_status_and_data(self, database):
        result = await schema.execute(
            CREATE_USER,
            variable_values={"email": "bad", "name": "A", "password": "abc"},
            context_value={"auth_context": ANONYMOUS},
        )

        assert result.data is None
        assert result.errors[0].message == "Invalid Input used.."
        assert result.errors[0].extensions == {
            "status": 422,
            "data": [{"message": "E-mail is invalid!"}, {"message": "Password is short.."}],
        }

    @pytest.mark.asyncio
    async def test_anonymous_posts_query(self, database):
        result = await schema.execute(POSTS, context_value={})

        assert result.errors[0].message == "Not Authenticated"
        assert result.errors[0].extensions == {"status": 401}


@pytest.mark.integration
class TestHttpApi:
    @pytest_asyncio.fixture
    async def client(self, database):
        from quill.api.app import create_app

        transport = httpx.ASGITransport(app=create_app())
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    async def graphql(self, client, query, variables=None, token=None):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        response = await client.post(
            "/graphql", json={"query": query, "variables": variables or {}}, headers=headers
        )
        assert response.status_code == 200
        return response.json()

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "X-Request-ID" in response.headers

    @pytest.mark.asyncio
    async def test_register_login_and_post(self, client):
        body = await self.graphql(
            client, CREATE_USER, {"email": "a@b.com", "name": "A", "password": "secret"}
        )
        user = body["data"]["createUser"]
        assert user["status"] == "I am new!"
        assert user["posts"] == []

        body = await self.graphql(client, LOGIN, {"email": "a@b.com", "password": "secret"})
        auth = body["data"]["login"]
        assert auth["userId"] == user["_id"]

        body = await self.graphql(
            client,
            CREATE_POST,
            {"title": "Hello world", "content": "First content", "imageUrl": "images/a.png"},
            token=auth["token"],
        )
        post = body["data"]["createPost"]
        assert post["creator"] == {"_id": user["_id"], "name": "A"}
        assert post["imageUrl"] == "images/a.png"
        assert post["createdAt"].endswith("Z")

        body = await self.graphql(client, POSTS, {"page": 1}, token=auth["token"])
        assert body["data"]["posts"]["totalPosts"] == 1
        assert body["data"]["posts"]["posts"][0]["creator"]["name"] == "A"

    @pytest.mark.asyncio
    async def test_wrong_password_returns_no_token(self, client):
        await self.graphql(
            client, CREATE_USER, {"email": "a@b.com", "name": "A", "password": "secret"}
        )

        body = await self.graphql(client, LOGIN, {"email": "a@b.com", "password": "nope!"})

        assert body["data"] is None
        assert body["errors"][0]["message"] == "Password does not match."
        assert body["errors"][0]["extensions"]["status"] == 401

    @pytest.mark.asyncio
    async def test_invalid_token_is_treated_as_anonymous(self, client):
        body = await self.graphql(client, POSTS, {"page": 1}, token="not-a-real-token")

        assert body["errors"][0]["extensions"]["status"] == 401

    @pytest.mark.asyncio
    async def test_duplicate_registration_conflicts(self, client):
        variables = {"email": "a@b.com", "name": "A", "password": "secret"}
        await self.graphql(client, CREATE_USER, variables)

        body = await self.graphql(client, CREATE_USER, variables)

        assert body["errors"][0]["message"] == "User already Exists"
        assert body["errors"][0]["extensions"]["status"] == 409
