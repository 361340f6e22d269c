"""Local stand-in for the OpenAI HTTP endpoints."""

from typing import Any, Dict, List, Optional

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


class FakeOpenAIServer:
    """Serves scripted replies and records what the client sent.

    Each reply is `(status, payload)`; a dict payload is sent as JSON,
    a string as plain text.
    """

    def __init__(self):
        self.transcription_reply = (200, {"text": "hello world"})
        self.chat_reply = (200, {"choices": [{"message": {"role": "assistant", "content": "- point one"}}]})
        self.transcription_requests: List[Dict[str, Any]] = []
        self.chat_requests: List[Dict[str, Any]] = []
        self.server: Optional[TestServer] = None

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_post("/v1/audio/transcriptions", self.handle_transcription)
        app.router.add_post("/v1/chat/completions", self.handle_chat)
        return app

    @property
    def base_url(self) -> str:
        return str(self.server.make_url("/v1"))

    @staticmethod
    def _reply(reply) -> web.Response:
        status, payload = reply
        if isinstance(payload, str):
            return web.Response(status=status, text=payload)
        return web.json_response(payload, status=status)

    async def handle_transcription(self, request: web.Request) -> web.Response:
        form = await request.post()
        upload = form["file"]
        self.transcription_requests.append({
            "authorization": request.headers.get("Authorization"),
            "model": form["model"],
            "filename": upload.filename,
            "content_type": upload.content_type,
            "body": upload.file.read(),
        })
        return self._reply(self.transcription_reply)

    async def handle_chat(self, request: web.Request) -> web.Response:
        self.chat_requests.append({
            "authorization": request.headers.get("Authorization"),
            "json": await request.json(),
        })
        return self._reply(self.chat_reply)


@pytest_asyncio.fixture
async def openai_server():
    fake = FakeOpenAIServer()
    server = TestServer(fake.make_app())
    await server.start_server()
    fake.server = server
    yield fake
    await server.close()
