"""Response classes whose bodies end with a single newline."""
from typing import Any

from fastapi.responses import JSONResponse, PlainTextResponse


class NewlineJSONResponse(JSONResponse):
    """Compact JSON body followed by ``\\n``, e.g. ``{"Name":"apple","quantity":54}\\n``."""

    def render(self, content: Any) -> bytes:
        return super().render(content) + b"\n"


class NewlinePlainTextResponse(PlainTextResponse):
    def render(self, content: Any) -> bytes:
        body = super().render(content)
        if not body.endswith(b"\n"):
            body += b"\n"
        return body
