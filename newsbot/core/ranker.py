"""
Similarity ranking over precomputed article embeddings.

Linear scan of candidate vectors against a query vector, returning the
top-K matches by cosine similarity.

Dependencies: pydantic, newsbot.core.vector_math
System role: Retrieval step of the RAG pipeline
"""

import logging
import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, Field

from newsbot.core.exceptions import DataIntegrityError
from newsbot.core.vector_math import cosine_similarity, decode_embedding
from newsbot.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")


class RankCandidate(BaseModel):
    """Item eligible for ranking."""

    id: int = Field(description="Corpus identifier")
    vector: list[float] | None = Field(default=None, description="Embedding, None when missing")


class RankedItem(BaseModel):
    """Ranked result entry."""

    id: int
    score: float


@dataclass(frozen=True)
class RankedMatch(Generic[ItemT]):
    """Ranked result carrying the original corpus item."""

    item: ItemT
    score: float


def _report_integrity_error(error: DataIntegrityError) -> None:
    log_with_context(
        logger,
        logging.WARNING,
        f"Excluding candidate from ranking: {error.message}",
        **error.details,
    )


def rank(
    query_vector: Sequence[float],
    candidates: Sequence[RankCandidate],
    top_k: int,
) -> list[RankedItem]:
    """
    Rank candidates by cosine similarity to the query.

    Candidates without a vector are skipped. Candidates whose dimension differs
    from the query are skipped and reported. Zero-magnitude vectors produce NaN
    and are skipped. Ties keep original candidate order.

    Args:
        query_vector: Query embedding
        candidates: Items to score, in corpus order
        top_k: Maximum number of results

    Returns:
        list[RankedItem]: At most top_k items, best first
    """
    if top_k <= 0 or not candidates:
        return []

    scored: list[RankedItem] = []
    for candidate in candidates:
        if candidate.vector is None:
            continue
        try:
            score = cosine_similarity(query_vector, candidate.vector)
        except DataIntegrityError as e:
            e.details["article_id"] = candidate.id
            _report_integrity_error(e)
            continue
        if math.isnan(score):
            continue
        scored.append(RankedItem(id=candidate.id, score=score))

    # sorted() is stable, so equal scores keep corpus order
    return sorted(scored, key=lambda item: item.score, reverse=True)[:top_k]


def rank_articles(
    query_vector: Sequence[float],
    articles: Sequence[ItemT],
    top_k: int,
) -> list[RankedMatch[ItemT]]:
    """
    Rank article records whose embedding is stored in encoded form.

    Articles must expose ``id`` and ``embedding_vector`` attributes.
    Undecodable vectors are reported and excluded like dimension mismatches.

    Args:
        query_vector: Query embedding
        articles: Article records, in corpus order
        top_k: Maximum number of results

    Returns:
        list[RankedMatch]: Articles paired with their score, best first
    """
    by_id = {}
    candidates = []
    for article in articles:
        vector = None
        if article.embedding_vector:
            try:
                vector = decode_embedding(article.embedding_vector)
            except DataIntegrityError as e:
                e.details["article_id"] = article.id
                _report_integrity_error(e)
        by_id[article.id] = article
        candidates.append(RankCandidate(id=article.id, vector=vector))

    return [
        RankedMatch(item=by_id[ranked.id], score=ranked.score)
        for ranked in rank(query_vector, candidates, top_k)
    ]
