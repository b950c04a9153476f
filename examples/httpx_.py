# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "fresh[httpx]",
# ]
#
# [tool.uv.sources]
# fresh = { path = "../", editable = true }
# ///


import httpx

from fresh.httpx import is_fresh

request = httpx.Request(
    "GET",
    "https://example.com/items/",
    headers={"If-None-Match": 'W/"abc", "def"'},
)
response = httpx.Response(200, headers={"ETag": '"abc"'})

print("fresh" if is_fresh(request, response) else "stale")
