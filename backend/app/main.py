import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import WanderError
from app.core.logger import logs
from app.routes.teleport_route import router as teleport_router
from app.routes.streetview_route import router as streetview_router
from app.routes.places_route import router as places_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    logs.log(logging.INFO, f"Server running at http://{settings.HOST}:{settings.PORT}")
    logs.log(logging.INFO, f"GOOGLE_KEY present: {bool(settings.GOOGLE_KEY)}")
    yield

app = FastAPI(title="Wander Mode API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.include_router(teleport_router)
app.include_router(streetview_router)
app.include_router(places_router)

@app.exception_handler(WanderError)
async def wander_error_handler(request: Request, exc: WanderError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Wander Mode API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "teleport": "/teleport",
            "streetview": "/streetview?lat=&lng=",
            "places": "/places?lat=&lng=&type=cafe",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Wander Mode API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=True)
