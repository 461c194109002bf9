from __future__ import annotations
from fastapi import FastAPI
from src.api.routers_spoofing import router as spoofing_router

app = FastAPI(title="LBP Spoofing Detection API", version="0.1.0")

app.include_router(spoofing_router)

@app.get('/health')
async def health():
    return {"status": "ok"}
