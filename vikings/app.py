from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from vikings import storage
from vikings.routes import router
from vikings.settings import Settings, configure_logging, load_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    resolved = settings or load_settings()
    configure_logging(resolved.log_level)
    storage.init_storage(resolved.data_dir)

    app = FastAPI(title="Viking Forge")
    app.state.settings = resolved
    app.include_router(router, prefix="/api")
    # Composited images, matching the image URLs built from API_URL
    app.mount("/api/static", StaticFiles(directory=storage.images_dir()), name="static")
    return app


# Default app instance for uvicorn (uses environment / .env settings)
app = create_app()
