# nurturebox/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nurturebox.config import config
from nurturebox.logger import get_logger
from nurturebox.features.characters.router import router as characters_router
from nurturebox.features.storyboard.router import router as storyboard_router
from nurturebox.features.views.router import fallback_router, router as views_router

log = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info(f"{config.app_title} starting (store backend: {config.store_backend})")
    yield

app = FastAPI(title=f"{config.app_title} API", debug=config.debug, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials="*" not in config.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    log.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

@app.get("/health")
async def health():
    return {"status": "ok", "store_backend": config.store_backend}

app.include_router(characters_router)
app.include_router(storyboard_router)
app.include_router(views_router)
app.include_router(fallback_router)
