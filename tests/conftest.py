from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.config import SECRET_KEY, ALGORITHM
from app.dependencies.database import get_submission_store
from app.main import app
from app.schemas.submission_schemas import CorpusEntry, SubmissionRecord, SubmissionSummary


class InMemorySubmissionStore:
    """Test double with the same async surface as SubmissionStore."""

    def __init__(self):
        self.records: List[SubmissionRecord] = []
        self.extra_corpus: List[CorpusEntry] = []

    async def load_corpus(self) -> List[CorpusEntry]:
        entries = [
            CorpusEntry(
                id=r.id,
                authorId=r.authorId,
                title=r.title,
                authorName=r.authorName,
                paragraphHashes=[p.hash for p in r.paragraphs],
            )
            for r in self.records
        ]
        return self.extra_corpus + entries

    async def append(self, record: SubmissionRecord) -> str:
        self.records.append(record)
        return record.id

    async def get(self, submission_id: str) -> Optional[SubmissionRecord]:
        return next((r for r in self.records if r.id == submission_id), None)

    def _newest_first(self, records) -> List[SubmissionSummary]:
        ordered = sorted(records, key=lambda r: r.createdAt, reverse=True)
        return [r.summary() for r in ordered]

    async def list_by_author(self, author_id: str) -> List[SubmissionSummary]:
        return self._newest_first([r for r in self.records if r.authorId == author_id])

    async def list_all(self) -> List[SubmissionSummary]:
        return self._newest_first(self.records)

    async def list_flagged(self) -> List[SubmissionSummary]:
        return self._newest_first([r for r in self.records if r.status == "flagged"])

    async def recent(self, limit: int = 10) -> List[SubmissionSummary]:
        return self._newest_first(self.records)[:limit]


def make_token(sub: str, role: str = "student", name: str = "", university: str = "") -> str:
    claims = {"sub": sub, "role": role, "name": name or sub, "university": university}
    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def auth_header(sub: str, role: str = "student", **claims) -> dict:
    return {"Authorization": f"Bearer {make_token(sub, role, **claims)}"}


@pytest.fixture
def auth():
    return auth_header


@pytest.fixture
def store():
    return InMemorySubmissionStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_submission_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
