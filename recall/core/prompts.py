"""
Prompt templates for document summaries and grounded answers.

Dependencies: langchain_core.prompts
System role: Prompt text shared by the summary task and the answerer
"""

from langchain_core.prompts import PromptTemplate

CHUNK_SEPARATOR = "\n\n---\n\n"

DOCUMENT_SUMMARY_TEMPLATE = """You are helping users understand what a document is about.

Based on these excerpts from a document, write a brief, accessible summary that:
- Explains what the document is about in plain language
- Highlights the main topic or purpose
- Uses simple, everyday words (avoid jargon unless necessary)
- Is 2-3 sentences, maximum 500 characters

Document excerpts:
{content}

Write a helpful summary for someone who hasn't read the document yet:"""

ANSWER_QUESTION_TEMPLATE = """You are a helpful assistant answering questions about a document.

Answer the question using the document excerpts below as your PRIMARY source.
When referencing document content, be specific (e.g., "The document explains...", "According to the text...").

You may use general knowledge to:
- Clarify technical terms or concepts
- Provide helpful context or background
- Explain connections between ideas

If the document contradicts common knowledge, trust the document.
If the question cannot be answered from the document, say so clearly, then offer relevant general information if helpful.

Be concise, accurate, and conversational.

Document excerpts:
{context}

Question: {question}

Answer:"""

DOCUMENT_SUMMARY_PROMPT = PromptTemplate.from_template(DOCUMENT_SUMMARY_TEMPLATE)
ANSWER_QUESTION_PROMPT = PromptTemplate.from_template(ANSWER_QUESTION_TEMPLATE)


def document_summary_prompt(content: str) -> str:
    return DOCUMENT_SUMMARY_PROMPT.format(content=content)


def answer_question_prompt(question: str, chunk_texts: list[str]) -> str:
    """
    Build the grounded-answer prompt.

    Args:
        question: User question
        chunk_texts: Retrieved chunk texts, nearest first

    Returns:
        str: Prompt with excerpts separated by horizontal rules
    """
    return ANSWER_QUESTION_PROMPT.format(
        context=CHUNK_SEPARATOR.join(chunk_texts),
        question=question,
    )
