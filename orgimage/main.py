# orgimage/main.py
# Responsibility: Application entry point. Configures and launches the FastAPI app.

import uvicorn
from fastapi import FastAPI

from orgimage.config.settings import settings
from orgimage.routers import images


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.
    """
    app = FastAPI(
        title=settings.APP.TITLE,
        description=settings.APP.DESCRIPTION,
        version=settings.APP.VERSION,
        debug=settings.SERVER.DEBUG
    )

    # Register Routers
    app.include_router(images.router)

    # Health Check
    @app.get("/health", tags=["System"])
    def health_check():
        return {"status": "ok", "version": settings.APP.VERSION}

    return app

# Application instance
app = create_app()


def run() -> None:
    """Console entry point."""
    uvicorn.run(
        "orgimage.main:app",
        host=settings.SERVER.HOST,
        port=settings.SERVER.PORT,
        reload=settings.SERVER.DEBUG
    )


if __name__ == "__main__":
    run()
