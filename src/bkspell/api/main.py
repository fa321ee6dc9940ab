# src/bkspell/api/main.py

from dataclasses import asdict
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..retrieval.engine import CorrectionEngine
from ..utils.spell_corrector import SpellCorrector

# ---------------------- Schemas ----------------------
class SuggestionOut(BaseModel):
    word: str
    distance: float
    confidence: float

class CheckResponse(BaseModel):
    word: str
    suggestions: List[SuggestionOut]

class CorrectRequest(BaseModel):
    text: str = Field(..., description="Free text, each token is corrected independently")
    min_confidence: float = 0.0

class TokenCorrection(BaseModel):
    token: str
    correction: Optional[str] = None

class CorrectResponse(BaseModel):
    text: str
    corrected_text: str
    corrections: List[TokenCorrection]

# ---------------------- Dependencies ----------------------
@lru_cache()
def get_engine() -> CorrectionEngine:
    return CorrectionEngine()

# ---------------------- Factory ----------------------
def create_app(engine: CorrectionEngine = None) -> FastAPI:
    """
    Factory to create FastAPI app.
    Allows injecting a prebuilt engine for testing.
    """
    app = FastAPI(title='bkspell API')

    app.add_middleware(
        CORSMiddleware,
        allow_origins=['*'],
        allow_methods=['*'],
        allow_headers=['*'],
    )

    if engine is not None:
        app.dependency_overrides[get_engine] = lambda: engine

    # ---------- Health check ----------
    @app.get('/')
    def read_root():
        return {'message': 'bkspell backend is running'}

    # ---------- Single word ----------
    @app.get('/check', response_model=CheckResponse)
    def check(word: str = Query(..., min_length=1), engine: CorrectionEngine = Depends(get_engine)):
        return {"word": word, "suggestions": engine.check(word)}

    # ---------- Free text ----------
    @app.post('/correct', response_model=CorrectResponse)
    def correct(req: CorrectRequest, engine: CorrectionEngine = Depends(get_engine)):
        corrector = SpellCorrector(engine)
        pairs = corrector.suggest(req.text, min_confidence=req.min_confidence)
        return {
            "text": req.text,
            "corrected_text": " ".join(fix or tok for tok, fix in pairs),
            "corrections": [{"token": tok, "correction": fix} for tok, fix in pairs],
        }

    # ---------- Stats ----------
    @app.get('/stats')
    def stats(engine: CorrectionEngine = Depends(get_engine)):
        return asdict(engine.stats())

    return app

# ---------------------- Uvicorn entry ----------------------
# Expose a top-level 'app' for Uvicorn; the engine is built on first request
app = create_app()
