"""
Sentence-aware chunking task.

Groups sentences into chunks of roughly target_words words, cutting only
at sentence boundaries once a chunk has min_words words, and repeats the
trailing sentences (up to overlap_words words) at the start of the next
chunk.

Dependencies: re
System role: Second stage of document processing
"""

import re
from dataclasses import dataclass

from recall.core.document_processing.models import ChunkDraft, PageText

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


@dataclass(frozen=True)
class _Sentence:
    text: str
    page_number: int
    word_count: int


def count_words(text: str) -> int:
    return len(text.split())


def split_sentences(pages: list[PageText]) -> list[_Sentence]:
    sentences = []
    for page in pages:
        for piece in SENTENCE_BOUNDARY.split(page.text):
            text = piece.strip()
            if text:
                sentences.append(_Sentence(text, page.page_number, count_words(text)))
    return sentences


class ChunkingTask:
    """Split extracted pages into overlapping, sentence-bounded chunks."""

    def __init__(
        self,
        target_words: int = 680,
        min_words: int = 600,
        overlap_words: int = 67,
    ) -> None:
        """
        Args:
            target_words: A chunk is closed before it would exceed this count...
            min_words: ...provided it already holds at least this many words
            overlap_words: Word budget for sentences carried into the next chunk
        """
        self._target_words = target_words
        self._min_words = min_words
        self._overlap_words = overlap_words

    def _overlap(self, sentences: list[_Sentence]) -> list[_Sentence]:
        overlap: list[_Sentence] = []
        words = 0
        for sentence in reversed(sentences):
            if words + sentence.word_count > self._overlap_words:
                break
            overlap.insert(0, sentence)
            words += sentence.word_count
        return overlap

    def chunk(self, pages: list[PageText]) -> list[ChunkDraft]:
        """
        Chunk pages into drafts.

        Args:
            pages: Extracted pages in page order

        Returns:
            list[ChunkDraft]: Drafts indexed 0..n-1; empty when there is no text
        """
        sentences = split_sentences(pages)
        if not sentences:
            return []

        drafts: list[ChunkDraft] = []
        current: list[_Sentence] = []
        running = 0
        start_page = sentences[0].page_number

        for i, sentence in enumerate(sentences):
            would_exceed = running + sentence.word_count > self._target_words
            if would_exceed and running >= self._min_words:
                drafts.append(
                    ChunkDraft(
                        text=" ".join(s.text for s in current),
                        chunk_index=len(drafts),
                        page_start=start_page,
                        page_end=sentences[i - 1].page_number,
                    )
                )
                current = self._overlap(current)
                running = sum(s.word_count for s in current)
                start_page = sentence.page_number

            current.append(sentence)
            running += sentence.word_count

        drafts.append(
            ChunkDraft(
                text=" ".join(s.text for s in current),
                chunk_index=len(drafts),
                page_start=start_page,
                page_end=sentences[-1].page_number,
            )
        )
        return drafts
