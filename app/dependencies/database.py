# app/dependencies/database.py

from typing import Any, Dict, List, Optional

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pydantic import ValidationError

from app.config import MONGODB_URI, MONGODB_DB, SUBMISSIONS_COLLECTION, RECENT_SUBMISSIONS_LIMIT
from app.logger import get_logger
from app.schemas.submission_schemas import CorpusEntry, SubmissionRecord, SubmissionSummary

logger = get_logger("database")

# Fields the matcher needs from each stored submission.
CORPUS_PROJECTION = {"_id": 1, "authorId": 1, "title": 1, "authorName": 1, "paragraphs.hash": 1}
# List views leave out the document body.
SUMMARY_PROJECTION = {"fullText": 0, "paragraphs": 0, "plagiarismSources": 0}

_client: Optional[AsyncIOMotorClient] = None


def corpus_entry_from_doc(doc: Dict[str, Any]) -> CorpusEntry:
    """Corpus view of a stored submission; paragraphHashes is None if the paragraphs are unusable."""
    paragraphs = doc.get("paragraphs")
    hashes: Optional[List[str]] = None
    if isinstance(paragraphs, list) and all(
        isinstance(p, dict) and isinstance(p.get("hash"), str) for p in paragraphs
    ):
        hashes = [p["hash"] for p in paragraphs]

    author_id = doc.get("authorId")
    return CorpusEntry(
        id=str(doc.get("_id")),
        authorId=str(author_id) if author_id is not None else None,
        title=doc.get("title") or "",
        authorName=doc.get("authorName") or "",
        paragraphHashes=hashes,
    )


def _from_doc(doc: Dict[str, Any]) -> Dict[str, Any]:
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    return doc


class SubmissionStore:
    """Append-only access to the submissions collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def load_corpus(self) -> List[CorpusEntry]:
        # Fully materialized before matching, so one comparison sees one snapshot.
        cursor = self.collection.find({}, CORPUS_PROJECTION).sort("createdAt", 1)
        docs = await cursor.to_list(length=None)
        logger.info(f"Loaded corpus snapshot of {len(docs)} submissions")
        return [corpus_entry_from_doc(d) for d in docs]

    async def append(self, record: SubmissionRecord) -> str:
        doc = record.model_dump(exclude={"id"})
        doc["_id"] = record.id
        result = await self.collection.insert_one(doc)
        logger.info(f"💾 Submission saved with ID: {result.inserted_id}")
        return str(result.inserted_id)

    async def get(self, submission_id: str) -> Optional[SubmissionRecord]:
        doc = await self.collection.find_one({"_id": submission_id})
        if doc is None:
            return None
        return SubmissionRecord.model_validate(_from_doc(doc))

    async def _summaries(self, query: Dict[str, Any], limit: int = 0) -> List[SubmissionSummary]:
        cursor = self.collection.find(query, SUMMARY_PROJECTION).sort("createdAt", -1)
        if limit:
            cursor = cursor.limit(limit)
        docs = await cursor.to_list(length=None)
        summaries: List[SubmissionSummary] = []
        for d in docs:
            try:
                summaries.append(SubmissionSummary.model_validate(_from_doc(d)))
            except ValidationError as e:
                logger.warning(f"Skipping malformed submission {d.get('_id')}: {e.error_count()} invalid fields")
        return summaries

    async def list_by_author(self, author_id: str) -> List[SubmissionSummary]:
        return await self._summaries({"authorId": author_id})

    async def list_all(self) -> List[SubmissionSummary]:
        return await self._summaries({})

    async def list_flagged(self) -> List[SubmissionSummary]:
        return await self._summaries({"status": "flagged"})

    async def recent(self, limit: int = RECENT_SUBMISSIONS_LIMIT) -> List[SubmissionSummary]:
        return await self._summaries({}, limit=limit)


def get_mongo_client() -> AsyncIOMotorClient:
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(MONGODB_URI)
    return _client


def close_mongo_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


def get_submission_store(
    mongo: AsyncIOMotorClient = Depends(get_mongo_client),
) -> SubmissionStore:
    return SubmissionStore(mongo[MONGODB_DB][SUBMISSIONS_COLLECTION])
