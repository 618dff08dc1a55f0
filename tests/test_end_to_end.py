"""
End-to-end: controllers attached to a router, served over ASGI.
"""

import pytest

from autoroute import InitFailedFault, Router, attach_controller, embed_controller

pytestmark = pytest.mark.asyncio

NOT_FOUND = "404 page not found"
NOT_ALLOWED = "405 method not allowed"


# ============================================================================
# Controllers
# ============================================================================

class ControllerRoot:

    def post(self, ctx):
        ctx.string(200, "ControllerRoot.POST [index]")

    def get(self, ctx):
        ctx.string(200, "ControllerRoot.GET [index]")

    def get_endpoint(self, ctx):
        ctx.string(200, "ControllerRoot.GET:Endpoint")

    def post_endpoint(self, ctx):
        ctx.string(200, "ControllerRoot.POST:Endpoint")

    def post_only_method(self, ctx):
        ctx.string(200, "ControllerRoot.POST:OnlyMethod")

    def action_known(self, ctx):
        ctx.string(200, "ControllerRoot.Action:Known")

    def ignore_this_method(self):
        raise AssertionError("ControllerRoot.ignore_this_method executed")

    def IgnoreThisMethod2(self, ctx):
        raise AssertionError("ControllerRoot.IgnoreThisMethod2 executed")


class ControllerCamel:

    def Post(self, ctx):
        ctx.string(200, "ControllerCamel.POST [index]")

    def Get(self, ctx):
        ctx.string(200, "ControllerCamel.GET [index]")

    def GetEndpoint(self, ctx):
        ctx.string(200, "ControllerCamel.GET:Endpoint")

    def PostEndpoint(self, ctx):
        ctx.string(200, "ControllerCamel.POST:Endpoint")

    def PostOnlyMethod(self, ctx):
        ctx.string(200, "ControllerCamel.POST:OnlyMethod")

    def ActionKnown(self, ctx):
        ctx.string(200, "ControllerCamel.Action:Known")

    def IgnoreThisMethod(self, ctx):
        raise AssertionError("ControllerCamel.IgnoreThisMethod executed")


class ControllerCommon:

    def get(self, ctx):
        ctx.string(200, "ControllerCommon.GET [index]")

    def get_endpoint(self, ctx):
        ctx.string(200, "ControllerCommon.GET:Endpoint")

    def post_endpoint(self, ctx):
        ctx.string(200, "ControllerCommon.POST:Endpoint")

    def post_data(self, ctx):
        ctx.string(200, "ControllerCommon.POST:Data")

    def action_known(self, ctx):
        ctx.string(200, "ControllerCommon.Action:Known")


class ControllerEmbedded:

    def action_internal(self, ctx):
        ctx.string(200, "ControllerEmbedded.Action:Internal")

    def action_override(self, ctx):
        ctx.string(200, "ControllerEmbedded.Action:Override [original]")


class ControllerCompound(ControllerEmbedded):

    def action_external(self, ctx):
        ctx.string(200, "ControllerCompound.Action:External")

    def action_override(self, ctx):
        ctx.string(200, "ControllerCompound.Action:Override [override]")


class ControllerTestInit:

    def init(self):
        raise RuntimeError("ControllerTestInit.init works fine!")

    def get(self, ctx):
        ctx.string(400, "ControllerTestInit.get should not happen")


class ControllerTestBefore:

    def before(self, ctx):
        ctx.string(418, "ControllerTestBefore.before")
        ctx.abort()

    def get(self, ctx):
        ctx.string(400, "ControllerTestBefore.get should not happen")


class ControllerTestAfter:

    def after(self, ctx):
        ctx.string(418, "ControllerTestAfter.after")

    def get(self, ctx):
        pass


class ControllerTestWrappers:

    def __init__(self):
        self.calls = []

    def init(self):
        self.calls.append("init")

    def before(self, ctx):
        self.calls.append("before")

    def after(self, ctx):
        self.calls.append("after")

    def put_index(self, ctx):
        self.calls.append("handler")
        ctx.string(202, "ControllerTestWrappers.put_index")


class ControllerAsync:

    async def before(self, ctx):
        ctx.state["seen"] = ["before"]

    async def get_items(self, ctx):
        ctx.state["seen"].append("handler")

    async def after(self, ctx):
        ctx.state["seen"].append("after")
        ctx.json(200, ctx.state["seen"])


class ControllerQuery:

    def get_echo(self, ctx):
        ctx.json(200, {"q": ctx.query_param("q"), "agent": ctx.header("user-agent")})

    def post_echo(self, ctx):
        ctx.string(200, ctx.body.decode("utf-8"))

    def get_broken(self, ctx):
        raise RuntimeError("handler failure")

    def get_name(self, ctx):
        ctx.response_headers["x-name"] = "Zoë ✓"
        ctx.string(200, "named")


# ============================================================================
# Helpers
# ============================================================================

async def check(client, cases):
    for method, path, status, body in cases:
        response = await client.request(method, path)
        assert (response.status_code, response.text) == (status, body), f"{method} {path}"


# ============================================================================
# Scenarios
# ============================================================================

async def test_root_controller_embedded(router, client_for):
    embed_controller(router, ControllerRoot())

    async with client_for(router) as client:
        await check(client, [
            ("GET", "/", 200, "ControllerRoot.GET [index]"),
            ("POST", "/", 200, "ControllerRoot.POST [index]"),
            ("GET", "/endpoint", 200, "ControllerRoot.GET:Endpoint"),
            ("POST", "/endpoint", 200, "ControllerRoot.POST:Endpoint"),
            ("PUT", "/endpoint", 405, NOT_ALLOWED),
            ("GET", "/onlymethod", 404, NOT_FOUND),
            ("GET", "/only-method", 405, NOT_ALLOWED),
            ("POST", "/only-method", 200, "ControllerRoot.POST:OnlyMethod"),
            ("GET", "/known", 200, "ControllerRoot.Action:Known"),
            ("GET", "/known/", 301, '<a href="/known">Moved Permanently</a>.\n\n'),
            ("POST", "/known", 200, "ControllerRoot.Action:Known"),
            ("POST", "/known/", 307, ""),
            ("PUT", "/known", 200, "ControllerRoot.Action:Known"),
            ("GET", "/ignore-this-method", 404, NOT_FOUND),
            ("POST", "/ignore-this-method2", 404, NOT_FOUND),
            ("POST", "/unknown", 404, NOT_FOUND),
            ("GET", "/long/endpoint/", 404, NOT_FOUND),
        ])


async def test_camel_case_controller_embedded(router, client_for):
    embed_controller(router, ControllerCamel())

    async with client_for(router) as client:
        await check(client, [
            ("GET", "/", 200, "ControllerCamel.GET [index]"),
            ("POST", "/", 200, "ControllerCamel.POST [index]"),
            ("GET", "/endpoint", 200, "ControllerCamel.GET:Endpoint"),
            ("POST", "/endpoint", 200, "ControllerCamel.POST:Endpoint"),
            ("PUT", "/endpoint", 405, NOT_ALLOWED),
            ("GET", "/onlymethod", 404, NOT_FOUND),
            ("GET", "/only-method", 405, NOT_ALLOWED),
            ("POST", "/only-method", 200, "ControllerCamel.POST:OnlyMethod"),
            ("GET", "/known", 200, "ControllerCamel.Action:Known"),
            ("POST", "/known", 200, "ControllerCamel.Action:Known"),
            ("DELETE", "/known", 200, "ControllerCamel.Action:Known"),
            ("GET", "/known/", 301, '<a href="/known">Moved Permanently</a>.\n\n'),
            ("GET", "/ignore-this-method", 404, NOT_FOUND),
            ("POST", "/unknown", 404, NOT_FOUND),
        ])


async def test_common_controller_attached(router, client_for):
    attach_controller(router, ControllerCommon())

    async with client_for(router) as client:
        await check(client, [
            ("GET", "/", 404, NOT_FOUND),
            ("GET", "/common/", 200, "ControllerCommon.GET [index]"),
            ("GET", "/common/endpoint", 200, "ControllerCommon.GET:Endpoint"),
            ("POST", "/common/endpoint", 200, "ControllerCommon.POST:Endpoint"),
            ("PUT", "/common/endpoint", 405, NOT_ALLOWED),
            ("GET", "/common/data", 405, NOT_ALLOWED),
            ("POST", "/common/data", 200, "ControllerCommon.POST:Data"),
            ("GET", "/common/known", 200, "ControllerCommon.Action:Known"),
            ("POST", "/common/known", 200, "ControllerCommon.Action:Known"),
            ("PUT", "/common/known", 200, "ControllerCommon.Action:Known"),
            ("GET", "/common/unknown", 404, NOT_FOUND),
            ("POST", "/common/unknown", 404, NOT_FOUND),
        ])


async def test_compound_controller(router, client_for):
    attach_controller(router, ControllerCompound())

    async with client_for(router) as client:
        await check(client, [
            ("GET", "/", 404, NOT_FOUND),
            ("GET", "/compound/internal", 200, "ControllerEmbedded.Action:Internal"),
            ("POST", "/compound/internal", 200, "ControllerEmbedded.Action:Internal"),
            ("POST", "/compound/internal/", 307, ""),
            ("PUT", "/internal", 404, NOT_FOUND),
            ("GET", "/compound/external", 200, "ControllerCompound.Action:External"),
            ("POST", "/external", 404, NOT_FOUND),
            ("GET", "/compound/override", 200, "ControllerCompound.Action:Override [override]"),
            ("POST", "/compound/override", 200, "ControllerCompound.Action:Override [override]"),
            ("PUT", "/compound/override/", 307, ""),
        ])


async def test_method_not_allowed_lists_methods(router, client_for):
    attach_controller(router, ControllerCommon())

    async with client_for(router) as client:
        response = await client.put("/common/endpoint")
    assert response.headers["allow"] == "GET, POST"


async def test_init_failure_binds_nothing(router, client_for):
    with pytest.raises(InitFailedFault) as excinfo:
        embed_controller(router, ControllerTestInit())
    assert str(excinfo.value).endswith("ControllerTestInit.init works fine!")

    async with client_for(router) as client:
        await check(client, [("GET", "/", 404, NOT_FOUND)])


async def test_before_can_abort(router, client_for):
    attach_controller(router, ControllerTestBefore())

    async with client_for(router) as client:
        await check(client, [("GET", "/test-before/", 418, "ControllerTestBefore.before")])


async def test_after_writes_response(router, client_for):
    attach_controller(router, ControllerTestAfter())

    async with client_for(router) as client:
        await check(client, [("GET", "/test-after/", 418, "ControllerTestAfter.after")])


async def test_wrapper_order(router, client_for):
    wrappers = ControllerTestWrappers()
    attach_controller(router, wrappers)
    assert wrappers.calls == ["init"]

    async with client_for(router) as client:
        await check(client, [
            ("PUT", "/test-wrappers/index", 202, "ControllerTestWrappers.put_index"),
        ])

    assert wrappers.calls == ["init", "before", "handler", "after"]


async def test_async_controller(router, client_for):
    attach_controller(router, ControllerAsync())

    async with client_for(router) as client:
        response = await client.get("/async/items")
    assert response.json() == ["before", "handler", "after"]


async def test_request_data_reaches_handlers(router, client_for):
    embed_controller(router.group("/api"), ControllerQuery())

    async with client_for(router) as client:
        echoed = await client.get("/api/echo", params={"q": "widgets"}, headers={"user-agent": "tests"})
        posted = await client.post("/api/echo", content=b"payload")
        head = await client.head("/api/echo")

    assert echoed.json() == {"q": "widgets", "agent": "tests"}
    assert posted.text == "payload"
    assert head.status_code == 405


async def test_handler_exception_is_500(router, client_for, caplog):
    embed_controller(router, ControllerQuery())

    async with client_for(router) as client:
        response = await client.get("/broken")

    assert response.status_code == 500
    assert any("Unhandled error in GET /broken" in r.getMessage() for r in caplog.records)


async def test_redirect_keeps_query_string(router, client_for):
    attach_controller(router, ControllerCommon())

    async with client_for(router) as client:
        moved = await client.get("/common/endpoint/", params={"page": "2"})
        kept = await client.post("/common/endpoint/?page=2&sort=asc")

    assert moved.status_code == 301
    assert moved.headers["location"] == "/common/endpoint?page=2"
    assert kept.status_code == 307
    assert kept.headers["location"] == "/common/endpoint?page=2&sort=asc"


async def test_unencodable_header_is_500(router, client_for, caplog):
    embed_controller(router, ControllerQuery())

    async with client_for(router) as client:
        response = await client.get("/name")

    assert response.status_code == 500
    assert "x-name" not in response.headers
    assert any("Unencodable response header in GET /name" in r.getMessage() for r in caplog.records)


async def test_trailing_slash_policy_end_to_end(client_for):
    from autoroute import RouteConfig

    router = Router()
    attach_controller(router, ControllerCommon(), config=RouteConfig(append_trailing_slash=True))

    async with client_for(router) as client:
        await check(client, [
            ("GET", "/common/endpoint/", 200, "ControllerCommon.GET:Endpoint"),
            ("GET", "/common/endpoint", 301, '<a href="/common/endpoint/">Moved Permanently</a>.\n\n'),
            ("GET", "/common/", 200, "ControllerCommon.GET [index]"),
        ])
