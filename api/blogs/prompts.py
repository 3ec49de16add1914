"""
Prompt builders for blog writing.
"""

from __future__ import annotations

MAX_SOURCE_CHARS = 12000


def blog_system_prompt() -> str:
    return (
        "You are a professional content writer focusing on helpful, accurate, and SEO-friendly blogs. "
        "Use only the facts provided in \"Scraped Content\" and the brand information the user has provided. "
        "If information is missing, you may add minimal general context but mark it as generic at the end. "
        "Output the blog in Markdown. Start with a \"Meta Description\" heading (one or two sentences)."
    )


def blog_user_prompt(*, topic: str, brand: str, email: str | None, scraped_content: str) -> str:
    return (
        f"Topic: {topic}\n"
        f"Brand (provided): {brand}\n"
        f"Email (provided): {email or 'N/A'}\n\n"
        "Scraped Content (use this as source facts):\n"
        f"{(scraped_content or '')[:MAX_SOURCE_CHARS]}\n\n"
        f"Write a comprehensive, well-structured blog post for \"{brand}\" about \"{topic}\". "
        "Use headings, bullets/lists where useful, and include a \"Conclusion\" section. "
        "If you added any generic info, append a short line \"Note: generic information added.\" at the end.\n"
        "Cite specific scraped facts inline using [source].\n"
    )
