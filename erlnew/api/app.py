from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from pathlib import Path
from .. import __version__
from ..generator.context import build_context
from ..generator.project import GeneratorError, generate
from ..generator.renderer import TemplateRenderer

app = FastAPI(title="erlnew API", version=__version__)
renderer = TemplateRenderer()

class ScaffoldReq(BaseModel):
    path: str
    app: str | None = None
    module: str | None = None
    sup: bool = False
    force: bool = False

@app.get("/catalog")
def catalog():
    return {"items": [{"id": name, "kind": "template"} for name in renderer.templates()]}

@app.post("/scaffold")
def scaffold(req: ScaffoldReq):
    context = build_context(req.path, app=req.app, module=req.module, sup=req.sup)
    try:
        written = generate(context, renderer, confirm=lambda _msg: req.force)
    except GeneratorError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except OSError as e:
        raise HTTPException(status_code=500, detail=str(e))

    out_dir = Path(req.path).expanduser().resolve()
    files = [p.resolve().relative_to(out_dir).as_posix() for p in written]
    return {"status": "ok", "out": str(out_dir), "files": files, "context": context.model_dump()}
