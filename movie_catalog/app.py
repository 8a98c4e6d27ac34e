from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.infrastructure.logging.logger import Logger, setup_logging
from movie_catalog.infrastructure.persistence.database import dispose_engine, get_engine
from movie_catalog.presentation.routers import auth, genres, movies, reviews, users

setup_logging()
logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    logger.info(f"Database engine ready: {engine.url.render_as_string(hide_password=True)}")
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("Database engine disposed")


app = FastAPI(title="Movie catalog", lifespan=lifespan)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(genres.router)
app.include_router(movies.router)
app.include_router(reviews.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie catalog API"}
