"""HTTP route tests."""

import httpx

from src.config import Settings

PAGE = (
    "<html><head>"
    '<script src="/a.js"></script>'
    '<script src="/b.js" defer></script>'
    "</head><body>"
    '<img src="hero.jpg" width="1600">'
    '<img src="thumb.png" loading="lazy">'
    "</body></html>"
)


def test_health(make_client, html_handler):
    client = make_client(html_handler(PAGE))
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_discovery_manifest(make_client, html_handler):
    client = make_client(html_handler(PAGE))
    resp = client.get("/discovery")
    assert resp.status_code == 200
    functions = resp.json()["functions"]
    assert len(functions) == 1
    tool = functions[0]
    assert tool["name"] == "speed_heuristics_checker"
    assert tool["endpoint"] == "/tools/speed_heuristics_checker"
    assert tool["http_method"] == "POST"
    assert tool["parameters"] == [
        {"name": "url", "type": "string", "description": "URL to analyse", "required": True}
    ]
    assert tool["auth_requirements"] == []


def test_get_tool_returns_camel_case_result(make_client, html_handler):
    client = make_client(html_handler(PAGE))
    resp = client.get("/tools/speed_heuristics_checker", params={"url": "https://example.com/"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["url"] == "https://example.com/"
    assert body["totalScripts"] == 2
    assert body["blockingScripts"] == 1
    assert body["inlineScriptKB"] == 0
    assert body["totalImages"] == 2
    assert body["imagesMissingLazyLoad"] == 1
    assert body["suspectedLargeImages"] == 1
    # 1/2 missing lazy is not more than half; one large image costs 5
    assert body["performanceSmellScore"] == 95
    assert body["notes"][0] == "2 <script> tags detected."


def test_post_tool_call(make_client, html_handler):
    client = make_client(html_handler(PAGE))
    resp = client.post(
        "/tools/speed_heuristics_checker",
        json={"parameters": {"url": "https://example.com/"}},
    )
    assert resp.status_code == 200
    assert resp.json()["performanceSmellScore"] == 95


def test_missing_url_is_400(make_client, html_handler):
    client = make_client(html_handler(PAGE))
    resp = client.get("/tools/speed_heuristics_checker")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing or invalid url"}


def test_non_string_url_is_400(make_client, html_handler):
    client = make_client(html_handler(PAGE))
    resp = client.post(
        "/tools/speed_heuristics_checker",
        json={"parameters": {"url": 123}},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing or invalid url"}


def test_fetch_failure_is_500(make_client, html_handler):
    client = make_client(html_handler("nope", status_code=404))
    resp = client.get("/tools/speed_heuristics_checker", params={"url": "https://example.com/x"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch https://example.com/x: 404"}


def test_network_failure_is_500(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    client = make_client(handler)
    resp = client.get("/tools/speed_heuristics_checker", params={"url": "https://example.com/"})
    assert resp.status_code == 500
    assert resp.json()["error"].startswith("Failed to fetch https://example.com/")


def test_discovery_advertises_auth_when_token_set(make_client, html_handler):
    client = make_client(html_handler(PAGE), settings=Settings(tool_bearer_token="s3cret"))
    tool = client.get("/discovery").json()["functions"][0]
    assert tool["auth_requirements"][0]["provider"] == "bearer"


def test_unparseable_url_is_400(make_client, html_handler):
    client = make_client(html_handler(PAGE))
    resp = client.get("/tools/speed_heuristics_checker", params={"url": "http://[abc"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing or invalid url"}
