from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel, Field

from prose_vader import __version__, config
from prose_vader.core.models import SentenceResult, Token, VScore
from prose_vader.pipeline import analyse_text, get_analyzer, mean_compound


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup fails when the lexicon or idioms are missing
    get_analyzer()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Prose Vader API",
    description="Rule-based (VADER) sentiment scores for prose, sentence by sentence",
    version=__version__,
)


class TokenIn(BaseModel):
    value: str
    pos_tag: str = ""


class SentenceRequest(BaseModel):
    tokens: Optional[List[TokenIn]] = None


class TextRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Raw text, any number of sentences")


class ScoreOut(BaseModel):
    neg: float
    neu: float
    pos: float
    compound: float
    display: str

    @classmethod
    def from_score(cls, score: VScore) -> "ScoreOut":
        return cls(**score.to_dict(), display=str(score))


class SentenceOut(BaseModel):
    sentence: str
    word_scores: List[float] = []
    score: ScoreOut

    @classmethod
    def from_result(cls, result: SentenceResult) -> "SentenceOut":
        return cls(
            sentence=result.text,
            word_scores=result.word_scores,
            score=ScoreOut.from_score(result.score),
        )


class TextResponse(BaseModel):
    sentences: List[SentenceOut]
    count: int
    mean_compound: float


@app.get("/", tags=["Root"])
def read_root():
    return {"message": "Welcome to Prose Vader API"}


@app.get("/health", tags=["Root"])
def health():
    tables = get_analyzer().tables
    return {"status": "ok", "lexicon_size": len(tables.lexicon), "idiom_count": len(tables.idioms)}


@app.post("/api/v1/sentence", response_model=SentenceOut, tags=["Scoring"])
def score_sentence(request: SentenceRequest):
    """
    Score one pre-tokenized sentence. Punctuation must be sent as separate
    tokens and word case preserved.
    """
    tokens = [Token(t.value, t.pos_tag) for t in request.tokens or []]
    return SentenceOut.from_result(get_analyzer().analyse(tokens))


@app.post("/api/v1/text", response_model=TextResponse, tags=["Scoring"])
def score_text(request: TextRequest):
    """Split raw text into sentences and score each one."""
    results = analyse_text(request.text)
    return TextResponse(
        sentences=[SentenceOut.from_result(r) for r in results],
        count=len(results),
        mean_compound=round(mean_compound(results), 4),
    )


def main():
    config.configure_logging()
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
