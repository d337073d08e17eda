"""
Document processing tasks.

Exports: ExtractionTask, ChunkingTask, SummaryTask, EmbeddingTask
"""

from .chunking_task import ChunkingTask
from .embedding_task import EmbeddingTask
from .extraction_task import ExtractionTask
from .summary_task import SummaryTask

__all__ = ["ExtractionTask", "ChunkingTask", "SummaryTask", "EmbeddingTask"]
