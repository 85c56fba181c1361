"""
NewsBot system prompt and context builder.

Defines the persona used for grounded answers and formats ranked articles
into the bounded context block the model sees.

Dependencies: langchain_core.prompts
System role: Prompt template for RAG answer generation
"""

from typing import Sequence

from langchain_core.prompts import ChatPromptTemplate

NO_ARTICLES_REPLY = "I don't have any news articles available yet. Please check back later!"

SYSTEM_PROMPT = """You are NewsBot, an AI assistant that helps users understand news and current events. You have access to a collection of news articles and should provide accurate, helpful responses based on the provided context.

Guidelines:
- Use the provided news articles as your primary source of information
- If the question cannot be answered from the provided articles, say so clearly
- Provide specific details and quotes when relevant
- Be conversational but informative
- Always cite which articles you're referencing when possible"""

RAG_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{persona}"),
    ("human", """Based on the following news articles, please answer this question: {question}

Relevant Articles:
{context}"""),
])


def excerpt(text: str, max_chars: int) -> str:
    """
    Bound article content for the prompt.

    Slicing a str counts code points, so a multi-byte character is never split.

    Args:
        text: Full article content
        max_chars: Maximum characters kept

    Returns:
        str: Content, with a trailing ellipsis when shortened
    """
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


def build_context(articles: Sequence, max_chars: int = 1000) -> str:
    """
    Render ranked articles as prompt context.

    Args:
        articles: Records exposing ``title`` and ``content``, in ranked order
        max_chars: Content excerpt cap per article

    Returns:
        str: Title/content blocks separated by blank lines
    """
    return "\n\n".join(
        f"Title: {article.title}\nContent: {excerpt(article.content, max_chars)}"
        for article in articles
    )
