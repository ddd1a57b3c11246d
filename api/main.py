from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content import router as content_router
from core import db, errors, settings
from faculty import router as faculty_router
from navigation import router as navigation_router
from news import router as news_router
from teaching import router as teaching_router

settings.configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize the DB pool once per process.
    app.state.navigation_fallback = settings.load_navigation_fallback()
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

# Allow the site frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.install_error_handlers(app)

app.include_router(news_router.router, tags=["news"])
app.include_router(faculty_router.router, tags=["faculty"])
app.include_router(teaching_router.router, tags=["teaching"])
app.include_router(content_router.router, tags=["content"])
app.include_router(navigation_router.router, tags=["navigation"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "department-site api"}
