"""Shared LLM invocation helper."""

from app.llm.client import get_chat_model


def invoke_llm(prompt: str, llm=None) -> str:
    """Invoke the chat model and return the stripped response content string."""
    if llm is None:
        llm = get_chat_model()
    response = llm.invoke(prompt)
    content = getattr(response, "content", str(response))
    # Gemini may return a list of content parts instead of a plain string.
    if isinstance(content, list):
        content = "".join(
            part.get("text", "") if isinstance(part, dict) else str(part)
            for part in content
        )
    return content.strip()
