# main.py: backend entrypoint
import importlib
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from journal_backend.app.config import DEBUG_MODE, describe, get_cors_origins
from journal_backend.app.db.session import init_db
from journal_backend.app.services.serve_frontend import mount_frontend, mount_media

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="Coffee Journal API", debug=DEBUG_MODE)

# --- CORS for Vite dev -------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include routers under /api ----------------------------------------------
def _include(module_name: str, prefix: str = "/api") -> None:
    m = importlib.import_module(f"journal_backend.app.routers.{module_name}")
    app.include_router(m.router, prefix=prefix)
    logger.info(f"✓ Mounted {module_name} at {prefix}")

_include("reviews")     # /api/reviews/...
_include("inventory")   # /api/inventory/...
_include("wishlist")    # /api/wishlist/...
_include("brew")        # /api/brew/...
_include("timers")      # /api/timers/...
_include("media")       # /api/media/...

# --- Health ------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/api/health")
async def api_health():
    # effective runtime config, DB url excluded
    return {"ok": True, **describe()}

@app.on_event("startup")
async def _startup():
    init_db()

# --- Static mounts (order matters: the SPA catch-all goes last) --------------
mount_media(app)
mount_frontend(app)
