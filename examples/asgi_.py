# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "fresh[httpx]",
# ]
#
# [tool.uv.sources]
# fresh = { path = "../", editable = true }
# ///


import asyncio

import httpx

from fresh.asgi import ConditionalGetMiddleware

processed_requests = 0


async def app(scope, receive, send):
    global processed_requests
    processed_requests += 1

    body = b"Hello, World!"
    await send(
        {
            "type": "http.response.start",
            "status": 200,
            "headers": [
                (b"content-type", b"text/plain"),
                (b"content-length", str(len(body)).encode()),
                (b"etag", b'"v1"'),
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})


async def main():
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=ConditionalGetMiddleware(app)),
        base_url="http://testserver",
    ) as client:
        response = await client.get("/")
        print(response.status_code, response.headers["etag"], response.content)

        response = await client.get("/", headers={"If-None-Match": response.headers["etag"]})
        print(response.status_code, response.content, f"processed_requests={processed_requests}")


if __name__ == "__main__":
    asyncio.run(main())
