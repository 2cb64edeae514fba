# Rating service package
from .aggregator import ratings_from_documents, summarize

__all__ = ["ratings_from_documents", "summarize"]
