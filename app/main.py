import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.core.errors import NotFoundError, PermissionDeniedError
from app.api.auth.routes import router as auth_router
from app.api.orgs.routes import router as orgs_router
from app.api.threads.routes import router as threads_router
from app.api.labels.routes import router as labels_router
from app.api.thread_labels.routes import router as thread_labels_router
from app.graphql.schema import get_graphql_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Thread Labels API")

# Routers
app.include_router(auth_router, prefix="/auth", tags=["Auth"])
app.include_router(orgs_router, prefix="/orgs", tags=["Orgs"])
app.include_router(threads_router, prefix="/threads", tags=["Threads"])
app.include_router(thread_labels_router, prefix="/threads", tags=["Thread Labels"])
app.include_router(labels_router, prefix="/labels", tags=["Labels"])

app.include_router(get_graphql_router(), prefix=settings.GRAPHQL_PATH, tags=["GraphQL"])


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(PermissionDeniedError)
async def permission_denied_handler(request: Request, exc: PermissionDeniedError):
    return JSONResponse(status_code=403, content={"detail": exc.message})


@app.get("/ping")
def ping():
    return {"message": "pong"}
