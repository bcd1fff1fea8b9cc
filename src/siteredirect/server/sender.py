"""ASGI response sending."""

from siteredirect._internal.asgi import Send
from siteredirect.http.response import Response


def _encode_headers(response: Response, body: bytes) -> list[tuple[bytes, bytes]]:
    pairs = list(response.headers)
    if response.content_type:
        pairs.insert(0, ("content-type", response.content_type))
    pairs.append(("content-length", str(len(body))))
    return [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in pairs]


async def send_response(response: Response, send: Send) -> None:
    """Send *response* as one ``http.response.start`` and one body message.

    Header values must already be Latin-1 safe; redirect locations are
    percent-encoded before they get here.
    """
    body = response.body_bytes
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": _encode_headers(response, body),
        }
    )
    await send({"type": "http.response.body", "body": body})
