from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from brdocs.config import configure_logging
from brdocs.presentation.api.metrics import registry
from brdocs.presentation.api.routes.documents import router as documents_router
from brdocs.presentation.api.routes.health import router as health_router

configure_logging()

app = FastAPI(title="brdocs", version="0.1.0")
app.include_router(health_router)
app.include_router(documents_router)


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
