"""
api/app.py — FastAPI app factory: wires the study service and routes
"""

import logging
import random
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from api.routes import router
from api.sample_content import load_sample_content
from api.session import LearnerSession
from driving_theory.services.content_repository import ContentRepository
from driving_theory.services.study_service import StudyService

logger = logging.getLogger(__name__)


def create_app(
    content: Optional[ContentRepository] = None,
    rng: Optional[random.Random] = None,
    tick_interval: Optional[float] = config.TICK_INTERVAL,
) -> FastAPI:
    learner = LearnerSession(config.DEFAULT_LEARNER_ID)
    if rng is None:
        seed = config.random_seed()
        rng = random.Random(seed) if seed is not None else random.Random()

    service = StudyService(
        content or load_sample_content(),
        user_id_provider=learner.current_user_id,
        rng=rng,
        tick_interval=tick_interval,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Stop the exam countdown so no tick outlives the app
        service.shutdown()

    app = FastAPI(title="Driving Theory Coach", docs_url=None, redoc_url=None, lifespan=lifespan)
    app.state.service = service
    app.state.learner = learner

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/")
    async def index():
        return {"name": "Driving Theory Coach", "ok": True}

    logger.info(f"App created with {len(service.content.list_questions())} questions")
    return app
