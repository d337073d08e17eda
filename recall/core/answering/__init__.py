from recall.core.answering.answerer import Answerer

__all__ = ["Answerer"]
