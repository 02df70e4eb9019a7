from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.api.routes import router
from app.core.config import settings
from app.core.logging_setup import configure_logging

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Configure console logging and the error log file on startup.
    """
    # Startup
    configure_logging()
    print(f"Server running on http://localhost:{settings.PORT}/")

    yield

    # Shutdown
    print("Shutting down slow feed server...")

app = FastAPI(
    title="Slow Feed Server",
    description="Static files plus a page rendered from two slow JSON feeds",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(router)

def run():
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
