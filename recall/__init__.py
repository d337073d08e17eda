"""
Recall: ask questions about your PDF documents.

Packages:
  - api: FastAPI routers, dependency wiring, app factory
  - application: upload and chat service orchestrators
  - boundary: database, document stores, temp files, model providers
  - configs: pydantic-settings configuration
  - core: chunking, embedding, summarization, retrieval, answering, processing
  - observability: logging and correlation ids
  - workers: Celery worker and document processing task
"""
