"""
Middleware and dependency injection, driven in-process.

Builds the same application the web server serves and pushes a few
requests through it with httpx's ASGI transport, without opening a
socket.  To serve it over HTTP instead, run ``python run.py`` from the
project root.
"""

import asyncio
from typing import List, Sequence, Tuple

import httpx

from guide_examples.app.main import create_app


DEMO_PATHS = ("/", "/greet/Ada", "/products", "/products/2", "/products/999", "/products/abc")


async def send_requests(paths: Sequence[str] = DEMO_PATHS) -> List[Tuple[str, httpx.Response]]:
    app = create_app()
    results = []
    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://guide.local") as client:
            for path in paths:
                response = await client.get(path)
                print(f"GET {path} -> {response.status_code} {response.text}")
                results.append((path, response))
    finally:
        # ASGITransport does not run the lifespan, so release singletons here.
        app.state.registry.close()
    return results


def main() -> None:
    print("=== Middleware and Dependency Injection ===\n")
    asyncio.run(send_requests())


if __name__ == "__main__":
    main()
