"""Naming and version values shared by every template of one run."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_VERSION = "0.1.0"


class GenerationContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    app: str
    module: str
    project: str
    version: str = DEFAULT_VERSION
    sup: bool = False


def camelize(text: str) -> str:
    """Turn ``my_app`` into ``MyApp`` and ``foo/bar`` into ``Foo.Bar``."""
    text = text.lstrip("_")
    if not text:
        return ""

    out = [_upper(text[0])]
    i = 1
    while i < len(text):
        ch = text[i]
        nxt = text[i + 1] if i + 1 < len(text) else ""
        if ch == "/":
            out.append("." + camelize(text[i + 1:]))
            break
        if ch != "_":
            out.append(ch)
            i += 1
        elif nxt == "_":
            i += 1
        elif "a" <= nxt <= "z":
            out.append(nxt.upper())
            i += 2
        elif "0" <= nxt <= "9":
            out.append(nxt)
            i += 2
        elif not nxt:
            break
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _upper(ch: str) -> str:
    return ch.upper() if "a" <= ch <= "z" else ch


def build_context(
    path: str,
    app: Optional[str] = None,
    module: Optional[str] = None,
    sup: bool = False,
) -> GenerationContext:
    if app is None:
        app = os.path.basename(os.path.abspath(os.path.expanduser(path)))
    if module is None:
        module = app
    return GenerationContext(
        path=path,
        app=app,
        module=module,
        project=camelize(app),
        sup=bool(sup),
    )
