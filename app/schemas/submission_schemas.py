from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime

SubmissionStatus = Literal["verified", "pending", "flagged"]

# ---- Core ----

class Paragraph(BaseModel):
    text: str
    hash: str
    isPlagiarized: bool = False
    sourceDocumentId: Optional[str] = None

class SimilaritySource(BaseModel):
    documentId: str
    documentTitle: str
    authorName: str
    similarityPercentage: float = Field(ge=0.0, le=100.0)

class MatchResult(BaseModel):
    annotatedParagraphs: List[Paragraph] = Field(default_factory=list)
    overallSimilarity: float = 0.0   # percent (0–100)
    sources: List[SimilaritySource] = Field(default_factory=list)

class CorpusEntry(BaseModel):
    """Read-only view of a prior submission, as the matcher sees it."""
    id: str
    authorId: Optional[str] = None
    title: str = ""
    authorName: str = ""
    paragraphHashes: Optional[List[str]] = None   # None when the stored record is malformed

# ---- Submissions ----

class SubmissionMetadata(BaseModel):
    title: str = Field(min_length=5)
    courseCode: str = Field(min_length=1)
    documentType: str = "project"
    description: str = Field(default="", max_length=500)

class SubmissionSummary(BaseModel):
    id: str
    title: str
    courseCode: str
    documentType: str
    authorId: str
    authorName: str
    university: str = ""
    createdAt: datetime
    similarityScore: float
    status: SubmissionStatus
    merkleRoot: str = ""

class SubmissionRecord(SubmissionSummary):
    description: str = ""
    fileName: str = ""
    fullText: str = ""
    paragraphs: List[Paragraph] = Field(default_factory=list)
    plagiarismSources: List[SimilaritySource] = Field(default_factory=list)

    def summary(self) -> SubmissionSummary:
        return SubmissionSummary(**self.model_dump(include=set(SubmissionSummary.model_fields)))
