from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from pathlib import Path

from nail_salon.services import api

root = Path(__file__).resolve().parent
INDEX_HTML = root / "templates" / "index.html"


# mounted apps get no lifespan events of their own, so shut the API down from here
@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    api.release_devices()


app = FastAPI(title="nail-salon web", lifespan=lifespan)

# the page is tiny and changes with every deploy, never let the phone cache it
@app.get("/", response_class=HTMLResponse)
def index():
    return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"), headers={"Cache-Control": "no-store"})

# script, styles and the default hand picture
app.mount("/static", StaticFiles(directory=str(root / "static")), name="static")

# the API goes last: its "" prefix matches everything not routed above
app.mount("", api.app)
