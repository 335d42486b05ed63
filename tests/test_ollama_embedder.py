# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-12
# Description: test_ollama_embedder.py
# -----------------------------------------------------------------------------
import asyncio
import json

import httpx
import pytest

from config.Config import Config
from embedding.EmbeddingCache import EmbeddingCache
from embedding.EmbeddingErrors import (
    EmbeddingError,
    EmbeddingMissingError,
    EmbeddingProviderError,
    EmbeddingTransportError,
)
from embedding.OllamaEmbedder import OllamaEmbedder
from ollama_fakes import TEST_OLLAMA_URL, FakeOllama, LocalOllamaServer, make_embedder


def _respond_with(response: httpx.Response):
    def handler(request: httpx.Request) -> httpx.Response:
        return response
    return handler


def test_embed_posts_model_and_input_and_returns_first_vector():
    fake = FakeOllama(vectors={"hello": [0.1, 0.2, 0.3]})
    embedder = make_embedder(fake)

    vec = asyncio.run(embedder.embed("hello"))

    assert vec == [0.1, 0.2, 0.3]
    assert len(fake.requests) == 1
    request = fake.requests[0]
    assert request.method == "POST"
    assert str(request.url) == f"{TEST_OLLAMA_URL}/api/embed"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"model": "nomic-embed-text", "input": "hello"}


def test_embed_endpoint_ignores_trailing_slash():
    fake = FakeOllama()
    embedder = make_embedder(fake, cfg=Config(ollama_url=f"{TEST_OLLAMA_URL}/"))

    asyncio.run(embedder.embed("x"))

    assert str(fake.requests[0].url) == f"{TEST_OLLAMA_URL}/api/embed"


def test_texts_sharing_200_char_prefix_hit_provider_once():
    fake = FakeOllama()
    embedder = make_embedder(fake)
    prefix = "a" * 200

    async def run():
        first = await embedder.embed(prefix + " first tail")
        second = await embedder.embed(prefix + " a different tail")
        return first, second

    first, second = asyncio.run(run())

    assert len(fake.requests) == 1
    assert second is first
    # the full text is still what gets sent
    assert fake.inputs == [prefix + " first tail"]


def test_short_texts_are_not_padded_into_the_same_key():
    fake = FakeOllama()
    embedder = make_embedder(fake)

    async def run():
        await embedder.embed("abc")
        await embedder.embed("abcd")
        await embedder.embed("abc")

    asyncio.run(run())

    assert fake.inputs == ["abc", "abcd"]
    assert embedder.cache_info() == {"entries": 2, "key_chars": 200}


def test_non_success_status_raises_provider_error_with_status_and_body():
    embedder = make_embedder(_respond_with(httpx.Response(503, text="ollama is loading")))

    with pytest.raises(EmbeddingProviderError) as exc_info:
        asyncio.run(embedder.embed("x"))

    assert exc_info.value.status_code == 503
    assert exc_info.value.body == "ollama is loading"
    assert len(embedder.cache) == 0


@pytest.mark.parametrize("body", [
    {},
    {"embeddings": []},
    {"embeddings": [[]]},
    {"embeddings": None},
    {"embedding": [0.1, 0.2]},
    {"embeddings": [["a", "b"]]},
])
def test_success_without_usable_vector_raises_missing_error(body):
    embedder = make_embedder(_respond_with(httpx.Response(200, json=body)))

    with pytest.raises(EmbeddingMissingError):
        asyncio.run(embedder.embed("x"))

    assert "x" not in embedder.cache


def test_non_json_success_body_raises_missing_error():
    embedder = make_embedder(_respond_with(httpx.Response(200, text="<html>proxy</html>")))

    with pytest.raises(EmbeddingMissingError):
        asyncio.run(embedder.embed("x"))


def test_connection_failure_raises_transport_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    embedder = make_embedder(refuse)

    with pytest.raises(EmbeddingTransportError) as exc_info:
        asyncio.run(embedder.embed("x"))

    assert isinstance(exc_info.value, EmbeddingError)
    assert exc_info.value.url == f"{TEST_OLLAMA_URL}/api/embed"


def test_fetch_embedding_bypasses_cache():
    fake = FakeOllama()
    embedder = make_embedder(fake)

    async def run():
        await embedder.embed("probe")
        await embedder.fetch_embedding("probe")

    asyncio.run(run())

    assert len(fake.requests) == 2
    assert embedder.request_count == 2


def test_injected_cache_is_used():
    cache = EmbeddingCache()
    cache.put("warm", [9.0, 9.0])
    fake = FakeOllama()
    embedder = make_embedder(fake)
    embedder.cache = cache

    assert asyncio.run(embedder.embed("warm")) == [9.0, 9.0]
    assert fake.requests == []


def test_timeout_is_configurable_and_zero_disables_it():
    assert make_embedder(FakeOllama(), cfg=Config(embed_timeout=5)).timeout.read == 5
    assert make_embedder(FakeOllama(), cfg=Config(embed_timeout=0)).timeout.read is None


def test_async_context_manager_closes_client():
    fake = FakeOllama()

    async def run():
        async with make_embedder(fake) as embedder:
            await embedder.embed("x")
            client = embedder._client
        return client

    client = asyncio.run(run())

    assert client.is_closed


def test_client_is_rebuilt_for_each_event_loop():
    fake = FakeOllama()
    embedder = make_embedder(fake)

    async def fetch():
        await embedder.fetch_embedding("x")
        return embedder._client

    first = asyncio.run(fetch())
    second = asyncio.run(fetch())

    assert first is not second
    assert len(fake.requests) == 2


def test_keep_alive_connection_survives_a_new_event_loop(monkeypatch):
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)

    with LocalOllamaServer({"a": [1.0, 2.0], "b": [3.0, 4.0]}) as server:
        embedder = OllamaEmbedder(Config(ollama_url=server.url))

        assert asyncio.run(embedder.fetch_embedding("a")) == [1.0, 2.0]
        assert asyncio.run(embedder.fetch_embedding("b")) == [3.0, 4.0]
        asyncio.run(embedder.aclose())

    assert server.inputs == ["a", "b"]
    assert embedder._client is None
