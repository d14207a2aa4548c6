from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Query
from loguru import logger
from pydantic import BaseModel

from trend_vader import config
from trend_vader.utils.sentiment import score_to_label
from trend_vader.utils.vader import SentimentIntensityAnalyzer

app = FastAPI(
    title="TrendVader API",
    description="Rule-based VADER sentiment scoring for short texts",
    version="1.0.0",
)

# One analyzer for every request; it keeps no per-call state
analyzer = SentimentIntensityAnalyzer()


class SentimentRequest(BaseModel):
    text: str


class SentimentResponse(BaseModel):
    text: str
    neg: float
    neu: float
    pos: float
    compound: float
    label: str
    score_definition: str


def _score_definition() -> str:
    strong, weak = config.LABEL_STRONG, config.LABEL_WEAK
    return (
        f"x <= -{strong}: Negative; -{strong} < x <= -{weak}: Somewhat-Negative; "
        f"-{weak} < x < {weak}: Neutral; {weak} <= x < {strong}: Somewhat-Positive; "
        f"x >= {strong}: Positive"
    )


def _score_text(text: str) -> SentimentResponse:
    if len(text) > config.MAX_TEXT_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Text too long ({len(text)} chars, max {config.MAX_TEXT_LENGTH}).",
        )
    scores = analyzer.score(text)
    label = score_to_label(scores.compound)
    logger.debug(f"Scored {len(text)} chars → compound={scores.compound:+.4f} ({label})")
    return SentimentResponse(
        text=text, label=label, score_definition=_score_definition(), **scores._asdict()
    )


@app.get("/", tags=["Root"])
def read_root():
    return {"message": "Welcome to TrendVader API"}


@app.get("/health", tags=["Root"])
def health():
    return {"status": "ok", "lexicon_size": len(analyzer.lexicon)}


@app.get("/sentiment", response_model=SentimentResponse, tags=["Sentiment"])
def get_sentiment_score(
    text: str = Query(..., description="Text to score"),
):
    return _score_text(text)


@app.post("/sentiment", response_model=SentimentResponse, tags=["Sentiment"])
def post_sentiment_score(request: SentimentRequest):
    return _score_text(request.text)


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    config.configure_logging()
    uvicorn.run(app, host=host or config.SERVER_HOST, port=port or config.SERVER_PORT)


if __name__ == "__main__":
    run()
