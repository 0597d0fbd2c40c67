"""Pytest configuration and fixtures."""

from typing import Any

import pytest
import pytest_asyncio
from fastapi import Body, FastAPI, Header, Request, Response
from fastapi.responses import JSONResponse
from httpx import ASGITransport

from expert_chat.core.config import Settings
from expert_chat.factory import build_clients
from expert_chat.storage import InMemoryTokenStore


class BackendError(Exception):
    """Error response of the fake backend."""

    def __init__(self, status: int, payload: dict[str, Any]) -> None:
        self.status = status
        self.payload = payload


def create_backend() -> FastAPI:
    """Create a fake chat backend that speaks the same REST API."""
    app = FastAPI()

    users: dict[str, dict[str, Any]] = {
        "alice": {"id": "u-1", "username": "alice", "password": "secret", "role": "user"},
        "erin": {"id": "u-2", "username": "erin", "password": "secret", "role": "expert"},
    }
    tokens: dict[str, str] = {}
    conversations: dict[str, dict[str, Any]] = {}
    messages: list[dict[str, Any]] = []
    history: list[dict[str, Any]] = []
    profile: dict[str, Any] = {"id": "p-1", "userId": "u-2", "name": "Erin", "isAvailable": True}

    @app.exception_handler(BackendError)
    async def backend_error_handler(request: Request, exc: BackendError) -> JSONResponse:
        return JSONResponse(status_code=exc.status, content=exc.payload)

    def public(user: dict[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in user.items() if k != "password"}

    def issue_token(username: str) -> str:
        token = f"token-{username}-{len(tokens) + 1}"
        tokens[token] = username
        return token

    def current_user(authorization: str | None) -> dict[str, Any]:
        if not authorization or not authorization.startswith("Bearer "):
            raise BackendError(401, {"error": "Not authenticated"})
        username = tokens.get(authorization.removeprefix("Bearer "))
        if username is None:
            raise BackendError(401, {"error": "Invalid token"})
        return users[username]

    def current_expert(authorization: str | None) -> dict[str, Any]:
        user = current_user(authorization)
        if user["role"] != "expert":
            raise BackendError(403, {"error": "Expert role required"})
        return user

    # ==================== Auth ====================

    @app.post("/auth/login")
    async def login(response: Response, body: dict = Body(...)):
        user = users.get(body.get("username", ""))
        if user is None or user["password"] != body.get("password"):
            raise BackendError(401, {"error": "Invalid credentials"})
        response.set_cookie("session", f"session-{user['id']}")
        return {"user": public(user), "token": issue_token(user["username"])}

    @app.post("/auth/register", status_code=201)
    async def register(body: dict = Body(...)):
        username = body.get("username", "")
        if username in users:
            raise BackendError(409, {"error": "Username already taken"})
        if len(body.get("password", "")) < 6:
            raise BackendError(409, {"errors": ["Password too short", "Password too weak"]})
        users[username] = {
            "id": f"u-{len(users) + 1}",
            "username": username,
            "password": body["password"],
            "email": body.get("email"),
            "role": body.get("role", "user"),
        }
        return {"user": public(users[username]), "token": issue_token(username)}

    @app.post("/auth/logout")
    async def logout(authorization: str | None = Header(None)):
        current_user(authorization)
        tokens.pop(authorization.removeprefix("Bearer "), None)
        return {"message": "Logged out"}

    @app.post("/auth/refresh")
    async def refresh(authorization: str | None = Header(None)):
        user = current_user(authorization)
        tokens.pop(authorization.removeprefix("Bearer "), None)
        return {"user": public(user), "token": issue_token(user["username"])}

    @app.get("/auth/me")
    async def me(authorization: str | None = Header(None)):
        return public(current_user(authorization))

    # ==================== Conversations ====================

    @app.get("/conversations")
    async def list_conversations(authorization: str | None = Header(None)):
        current_user(authorization)
        return list(conversations.values())

    @app.post("/conversations", status_code=201)
    async def create_conversation(
        body: dict = Body(...),
        authorization: str | None = Header(None),
    ):
        user = current_user(authorization)
        if not body.get("title"):
            raise BackendError(422, {"errors": ["Title is required"]})
        conversation = {
            "id": f"c-{len(conversations) + 1}",
            "title": body["title"],
            "description": body.get("description"),
            "status": "waiting",
            "participants": [user["id"]],
            "assignedExpertId": None,
        }
        conversations[conversation["id"]] = conversation
        return conversation

    @app.get("/conversations/{conversation_id}")
    async def get_conversation(conversation_id: str, authorization: str | None = Header(None)):
        current_user(authorization)
        if conversation_id not in conversations:
            raise BackendError(404, {"error": "Conversation not found"})
        return conversations[conversation_id]

    @app.get("/conversations/{conversation_id}/messages")
    async def list_messages(conversation_id: str, authorization: str | None = Header(None)):
        current_user(authorization)
        return [m for m in messages if m["conversationId"] == conversation_id]

    @app.post("/messages", status_code=201)
    async def send_message(body: dict = Body(...), authorization: str | None = Header(None)):
        user = current_user(authorization)
        if body.get("conversationId") not in conversations:
            raise BackendError(404, {"error": "Conversation not found"})
        message = {
            "id": f"m-{len(messages) + 1}",
            "conversationId": body["conversationId"],
            "senderId": user["id"],
            "senderType": "expert" if user["role"] == "expert" else "user",
            "content": body["content"],
            "messageType": body.get("messageType", "text"),
        }
        messages.append(message)
        return message

    # ==================== Expert ====================

    @app.get("/expert/queue")
    async def expert_queue(authorization: str | None = Header(None)):
        expert = current_expert(authorization)
        return {
            "waitingConversations": [
                c for c in conversations.values() if c["assignedExpertId"] is None
            ],
            "assignedConversations": [
                c for c in conversations.values() if c["assignedExpertId"] == expert["id"]
            ],
        }

    @app.post("/expert/conversations/{conversation_id}/claim")
    async def claim(conversation_id: str, authorization: str | None = Header(None)):
        expert = current_expert(authorization)
        conversation = conversations.get(conversation_id)
        if conversation is None:
            raise BackendError(404, {"error": "Conversation not found"})
        if conversation["assignedExpertId"] is not None:
            raise BackendError(409, {"error": "Conversation already claimed"})
        conversation["assignedExpertId"] = expert["id"]
        conversation["status"] = "active"
        history.append({
            "id": f"a-{len(history) + 1}",
            "conversationId": conversation_id,
            "expertId": expert["id"],
            "status": "active",
            "assignedAt": "2024-05-01T10:00:00Z",
        })
        return {"success": True}

    @app.post("/expert/conversations/{conversation_id}/unclaim")
    async def unclaim(conversation_id: str, authorization: str | None = Header(None)):
        current_expert(authorization)
        conversation = conversations.get(conversation_id)
        if conversation is None:
            raise BackendError(404, {"error": "Conversation not found"})
        conversation["assignedExpertId"] = None
        conversation["status"] = "waiting"
        return {"success": True}

    @app.get("/expert/profile")
    async def get_profile(authorization: str | None = Header(None)):
        current_expert(authorization)
        return profile

    @app.put("/expert/profile")
    async def update_profile(body: dict = Body(...), authorization: str | None = Header(None)):
        current_expert(authorization)
        profile.update(body)
        return profile

    @app.get("/expert/assignments/history")
    async def assignment_history(authorization: str | None = Header(None)):
        current_expert(authorization)
        return history

    return app


@pytest.fixture
def token_store():
    """Create an empty in-memory token store."""
    return InMemoryTokenStore()


@pytest.fixture
def backend():
    """Create the fake backend application."""
    return create_backend()


@pytest_asyncio.fixture
async def clients(backend, token_store):
    """Create auth and chat clients wired to the fake backend."""
    transport = ASGITransport(app=backend)
    async with build_clients(
        settings=Settings(api_base_url="http://test"),
        token_store=token_store,
        transport=transport,
    ) as bundle:
        yield bundle
