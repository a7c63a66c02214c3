import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import LOG_FILE, LOG_LEVEL, MAGIC_API_URL, PROJECT_DIRECTORY
from routes.components import router as components_router
from routes.history import router as history_router
from routes.pages import router as pages_router
from routes.magic import router as magic_router
from services.container import ComponentServices

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(LOG_FILE)
    ]
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="ComponentCraft Backend",
    description="Context-aware UI component generation with versioned history and page composition",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(components_router)
app.include_router(history_router)
app.include_router(pages_router)
app.include_router(magic_router)


@app.on_event("startup")
async def startup_event():
    """Build and open the service graph."""
    app.state.services = ComponentServices().open()
    logger.info("ComponentCraft Backend started successfully")
    logger.info(f"Project directory: {PROJECT_DIRECTORY}")
    if not MAGIC_API_URL:
        logger.info("MAGIC_API_URL not set; remote generation stage disabled")


@app.on_event("shutdown")
async def shutdown_event():
    services = getattr(app.state, "services", None)
    if services is not None:
        services.close()
    logger.info("ComponentCraft Backend stopped")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    logger.debug("Health check requested")
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "remote_generation": bool(MAGIC_API_URL),
    }


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "ComponentCraft Backend API",
        "version": "1.0.0",
        "endpoints": {
            "generate": "/api/components/generate",
            "variations": "/api/components/variations",
            "context": "/api/components/context",
            "history": "/api/history",
            "collections": "/api/collections",
            "pages": "/api/pages/templates",
            "magic": "/api/magic/generate",
            "health": "/health",
            "docs": "/docs"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
