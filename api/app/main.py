import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routes import wizards, challenges
from app.store import create_store

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the document store and close it on shutdown."""
    if getattr(app.state, 'store', None) is None:
        if settings.store_backend == 'sql':
            from app.db.database import init_db
            await init_db()
        app.state.store = create_store(settings)
        logger.info('Using %s document store', settings.store_backend)
    yield
    await app.state.store.close()


app = FastAPI(
    title='Wizard Directory API',
    description='Network-scoped wizard and challenge records',
    version='0.1.0',
    lifespan=lifespan,
)
app.state.store = None

# CORS for mobile app
app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

# Routes
app.include_router(wizards.router, prefix='/api/{network}/wizards', tags=['wizards'])
app.include_router(challenges.router, prefix='/api/{network}', tags=['challenges'])


@app.get('/health')
async def health_check():
    """Health check endpoint."""
    return {'status': 'ok', 'service': 'wizard-directory-api'}
