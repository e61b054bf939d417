import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weather_gateway.core.config import settings
from weather_gateway.core.errors import GatewayError
from weather_gateway.core.logger import logs
from weather_gateway.models.weather_model import HealthResponse
from weather_gateway.routes.weather_route import router as weather_router

app = FastAPI(title="Weather Gateway")

# Frontend runs on a different port
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(weather_router)

# --- Error Envelope ---
@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logs.log(logging.INFO, f"{request.method} {request.url.path} -> {exc.status_code}", extra=exc.to_payload())
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Weather Gateway API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "weather": "/weather?latitude=<lat>&longitude=<lon>",
            "weather_by_city": "/weather/city/{city_name}",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health", response_model=HealthResponse)
async def health_check():
    return {"status": "OK", "message": "Weather API is running"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("weather_gateway.main:app", host=settings.HOST, port=settings.PORT, reload=True)
