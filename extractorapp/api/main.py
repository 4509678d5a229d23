import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from .config import configure_logging, load_settings
from .extractor import extract, extract_navigation, run_extraction

settings = load_settings()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Logging diatur saat server start
    configure_logging(settings)
    yield


app = FastAPI(title="Page Extractor", lifespan=lifespan)

# Semua domain boleh memanggil API ini (frontend statis)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# --- Endpoints ---
# Error logis tetap dikembalikan dengan HTTP 200, lihat field "status".

@app.get("/api/health")
async def health():
    return {"status": "success"}


@app.get("/api/extract")
async def extract_page(i: str | None = Query(default=None)):
    """Ekstraksi lengkap: movie, atau series beserta semua season dan episode."""
    return await asyncio.to_thread(run_extraction, extract, i, settings)


@app.get("/api/navigation")
async def navigation(i: str | None = Query(default=None)):
    """Hanya satu level: isi halaman ini + daftar season/episode datar."""
    return await asyncio.to_thread(run_extraction, extract_navigation, i, settings)
