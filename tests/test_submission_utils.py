"""
End-to-end tests for segment → match → digest.
"""

import pytest

from app.schemas.submission_schemas import CorpusEntry, SubmissionMetadata
from app.utils.merkle_utils import build_digest
from app.utils.paragraph_utils import hash_text, paragraph_hashes, segment
from app.utils.similarity_utils import match
from app.utils.submission_utils import analyze_document, build_submission_record


ESSAY = "\n".join([
    "Blockchains record data in linked blocks.",
    "Each block stores the hash of its predecessor.",
    "",
    "Tampering with one block breaks every later link.",
])

PRIOR = CorpusEntry(
    id="prior-1",
    authorId="u2",
    title="Ledger basics",
    authorName="Grace",
    paragraphHashes=[hash_text("Each block stores the hash of its predecessor.")],
)


def test_alpha_beta_gamma_scenario():
    # "Beta line." is exactly ten characters, so it only qualifies with a lower minimum
    text = "Alpha line.\nBeta line.\nGamma line."
    paragraphs = segment(text, min_length=9)
    corpus = [CorpusEntry(
        id="prior", authorId="other", title="Prior", authorName="Someone",
        paragraphHashes=[hash_text("Beta line."), hash_text("Delta line.")],
    )]

    result = match(paragraphs, corpus, "me")

    assert len(paragraphs) == 3
    assert [p.isPlagiarized for p in result.annotatedParagraphs] == [False, True, False]
    assert result.overallSimilarity == pytest.approx(100 / 3)
    assert len(result.sources) == 1
    assert result.sources[0].documentId == "prior"
    assert result.sources[0].similarityPercentage == pytest.approx(100 / 3)


def test_default_minimum_drops_ten_character_line():
    assert [p.text for p in segment("Alpha line.\nBeta line.\nGamma line.")] == [
        "Alpha line.", "Gamma line.",
    ]


def test_analyze_document_uses_same_hash_order():
    result, root = analyze_document(ESSAY, [PRIOR], "u1")

    assert root == build_digest(paragraph_hashes(segment(ESSAY)))
    assert [p.hash for p in result.annotatedParagraphs] == paragraph_hashes(segment(ESSAY))
    assert result.overallSimilarity == pytest.approx(100 / 3)


def test_digest_ignores_author_and_matches():
    _, root_a = analyze_document(ESSAY, [PRIOR], "u1")
    _, root_b = analyze_document(ESSAY, [], "someone-else")
    assert root_a == root_b


def test_blank_document_has_no_root():
    result, root = analyze_document("\n \n", [PRIOR], "u1")
    assert root == ""
    assert result.overallSimilarity == 0


def test_build_submission_record():
    metadata = SubmissionMetadata(title="My ledger essay", courseCode="cs101")
    author = {"sub": "u1", "name": "Ada", "university": "Uni A"}

    record = build_submission_record(metadata, ESSAY, [PRIOR], author, file_name="essay.txt")

    assert record.authorId == "u1"
    assert record.authorName == "Ada"
    assert record.university == "Uni A"
    assert record.fileName == "essay.txt"
    assert record.fullText == ESSAY
    assert record.documentType == "project"
    assert len(record.paragraphs) == 3
    assert record.similarityScore == pytest.approx(100 / 3)
    assert record.status == "flagged"
    assert [s.documentId for s in record.plagiarismSources] == ["prior-1"]
    assert record.merkleRoot == build_digest([p.hash for p in record.paragraphs])
    assert record.id


def test_build_submission_record_verified_below_threshold():
    metadata = SubmissionMetadata(title="My ledger essay", courseCode="cs101")
    record = build_submission_record(metadata, ESSAY, [PRIOR], {"sub": "u1"}, threshold=50.0)
    assert record.status == "verified"


def test_own_prior_submission_not_counted():
    own = PRIOR.model_copy(update={"authorId": "u1"})
    metadata = SubmissionMetadata(title="My ledger essay", courseCode="cs101")
    record = build_submission_record(metadata, ESSAY, [own], {"sub": "u1"})
    assert record.similarityScore == 0
    assert record.plagiarismSources == []
    assert record.status == "verified"
