"""
Article API endpoints.

Routes:
- GET /articles - List the corpus (newest first)
- POST /embeddings/backfill - Compute missing article embeddings

Dependencies: newsbot.boundary.corpus_store, newsbot.application.services.backfill_service
System role: Corpus HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from newsbot.api.deps import get_backfill_service, get_corpus_store
from newsbot.application.services.backfill_service import BackfillService
from newsbot.boundary.corpus_store import CorpusStore
from newsbot.core.exceptions import NewsBotException
from newsbot.models.article import ArticleResponse, BackfillResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["articles"])


@router.get("/articles", response_model=list[ArticleResponse])
async def list_articles(
    corpus: CorpusStore = Depends(get_corpus_store),
) -> list[ArticleResponse]:
    """
    List all articles.

    Raises:
        HTTPException(500): Corpus store unavailable
    """
    try:
        articles = await corpus.list_articles()
    except NewsBotException as e:
        logger.error(f"{__name__}:list_articles - {e}")
        raise HTTPException(status_code=500, detail="Failed to get articles")

    return [ArticleResponse.from_model(article) for article in articles]


@router.post("/embeddings/backfill", response_model=BackfillResponse)
async def backfill_embeddings(
    backfill_service: BackfillService = Depends(get_backfill_service),
) -> BackfillResponse:
    """
    Generate embeddings for every article that lacks one.

    Runs synchronously; per-article failures are counted, not raised.

    Returns:
        BackfillResponse: Processed and failed counts

    Raises:
        HTTPException(500): Articles could not be listed
    """
    try:
        summary = await backfill_service.run()
    except NewsBotException as e:
        logger.error(f"{__name__}:backfill_embeddings - {e}")
        raise HTTPException(status_code=500, detail="Failed to generate embeddings")

    return BackfillResponse(
        processed_count=summary.processed_count,
        failed_count=summary.failed_count,
    )
