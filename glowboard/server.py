import asyncio

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from glowboard.api.routers import auth_router
from glowboard.api.graphql.router import graphql_router
from glowboard.core.config import get_settings
from glowboard.core.logging import configure_logging
from glowboard.db.document_store import get_document_store

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.document_store = get_document_store()
app.state.bootstrap_lock = asyncio.Lock()

# Include routers
app.include_router(auth_router.router, prefix=settings.API_V1_STR, tags=["auth"])
app.include_router(graphql_router, prefix="/graphql", tags=["graphql"])


@app.get("/", tags=["Root"])
async def read_root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME} API"}

# Optional: Add logic to run the server directly for development
if __name__ == "__main__":
    uvicorn.run("glowboard.server:app", host="0.0.0.0", port=8000, reload=True)
