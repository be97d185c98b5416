import json

import httpx
import pytest

from recipeagent.shared.errors import (
    ConfigurationAbsent,
    UpstreamParseFailure,
    UpstreamStatusFailure,
    UpstreamTransportFailure,
)

from helpers import chat_reply

MESSAGES = [{"role": "user", "content": "hi"}]


@pytest.mark.asyncio
async def test_complete_chat_posts_non_streaming_request(make_chat_client):
    chat, recorder = make_chat_client(lambda r: chat_reply("hello"))

    assert await chat.complete_chat(MESSAGES, temperature=0.0, max_tokens=10) == "hello"

    request = recorder.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://llm.test/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer test-llm-key"
    body = json.loads(request.content)
    assert body == {
        "model": "test-model",
        "messages": MESSAGES,
        "temperature": 0.0,
        "max_tokens": 10,
        "stream": False,
    }


@pytest.mark.asyncio
async def test_missing_key(make_chat_client):
    chat, recorder = make_chat_client(lambda r: chat_reply("hello"), api_key="")

    assert not chat.configured
    with pytest.raises(ConfigurationAbsent):
        await chat.complete_chat(MESSAGES)
    assert recorder.calls == 0


@pytest.mark.asyncio
async def test_error_status(make_chat_client):
    chat, _ = make_chat_client(lambda r: httpx.Response(401, json={"error": "bad key"}))

    with pytest.raises(UpstreamStatusFailure) as exc:
        await chat.complete_chat(MESSAGES)
    assert exc.value.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"choices": []}),
        httpx.Response(200, json={"id": "x"}),
        httpx.Response(200, text="not json"),
    ],
)
async def test_unexpected_body(make_chat_client, response):
    chat, _ = make_chat_client(lambda r: response)

    with pytest.raises(UpstreamParseFailure):
        await chat.complete_chat(MESSAGES)


@pytest.mark.asyncio
async def test_timeout_is_a_transport_failure(make_chat_client):
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    chat, _ = make_chat_client(handler)

    with pytest.raises(UpstreamTransportFailure):
        await chat.complete_chat(MESSAGES)


@pytest.mark.asyncio
async def test_non_200_success_status_is_accepted(make_chat_client):
    reply = chat_reply("hello")
    chat, _ = make_chat_client(lambda r: httpx.Response(203, json=reply.json()))

    assert await chat.complete_chat(MESSAGES) == "hello"


@pytest.mark.asyncio
async def test_too_many_redirects_is_a_transport_failure(make_chat_client):
    def handler(request):
        raise httpx.TooManyRedirects("too many redirects", request=request)

    chat, _ = make_chat_client(handler)

    with pytest.raises(UpstreamTransportFailure):
        await chat.complete_chat(MESSAGES)
