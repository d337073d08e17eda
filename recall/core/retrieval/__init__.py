from recall.core.retrieval.retriever import Retriever

__all__ = ["Retriever"]
