from dotenv import find_dotenv, load_dotenv

# .env in the working directory, if any; real env vars win
load_dotenv(find_dotenv(usecwd=True))

from fastapi import FastAPI

from . import __version__
from .routers import traces
from .settings import load_settings

app = FastAPI(title="stackmin", version=__version__)

app.include_router(traces.router)


@app.get("/health")
def health():
    settings = load_settings()
    return {
        "status": "ok",
        "version": __version__,
        "internal_prefixes": list(settings.internal_prefixes),
        "max_trace_bytes": settings.max_trace_bytes,
    }
