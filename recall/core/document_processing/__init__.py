"""Document processing pipeline: extraction, chunking, summarization, embedding."""
