from pydantic import BaseModel, Field
from typing import List


class LabelCount(BaseModel):
    label: str
    value: int


class ReportStats(BaseModel):
    total: int
    flagged: int
    averageScore: float     # mean similarityScore (0–100)
    submissionsByCourse: List[LabelCount] = Field(default_factory=list)


class AdminStats(BaseModel):
    totalDocuments: int
    verifiedDocuments: int
    flaggedDocuments: int
    pendingDocuments: int
    blockchainRecords: int  # records carrying a merkle root
    totalAuthors: int


class AnalyticsReport(BaseModel):
    submissionsByMonth: List[LabelCount] = Field(default_factory=list)
    submissionsByUniversity: List[LabelCount] = Field(default_factory=list)


class IntegrityReport(BaseModel):
    submissionId: str
    storedRoot: str
    recomputedRoot: str
    paragraphHashesValid: bool
    rootValid: bool
    valid: bool
