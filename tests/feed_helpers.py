"""
Fake retailer feeds for tests
"""
import asyncio

import httpx

from app.schemas.fuel import Source


# --- Route markers understood by the fake feed transport ---
SLOW = "slow"          # never answers within the test deadline
REFUSED = "refused"    # connection error
NOT_JSON = "not-json"  # 200 with an HTML body


SOURCE_A = Source(name="Alpha Fuels", url="https://alpha.example/fuel.json")
SOURCE_B = Source(name="Beta Petrol", url="https://beta.example/prices.json")
SOURCE_C = Source(name="Gamma Energy", url="https://gamma.example/data.json")


def build_feed_transport(routes: dict, calls: list = None, delay: float = 2.0) -> httpx.MockTransport:
    """
    Fake network for feed tests.

    routes maps URL -> JSON body, httpx.Response, or one of the markers above.
    Unknown URLs answer 404. Every requested URL is appended to `calls`.
    """
    async def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if calls is not None:
            calls.append(url)

        if url not in routes:
            return httpx.Response(404, text="not found")

        route = routes[url]
        if isinstance(route, httpx.Response):
            return route
        if route == SLOW:
            await asyncio.sleep(delay)
            return httpx.Response(200, json=[])
        if route == REFUSED:
            raise httpx.ConnectError("connection refused", request=request)
        if route == NOT_JSON:
            return httpx.Response(200, text="<html><body>Fuel prices</body></html>")
        return httpx.Response(200, json=route)

    return httpx.MockTransport(handler)


class FakeClock:
    """Manually advanced clock for cache expiry tests"""

    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now
