"""Text filters that wrap input for pasting into git hosting pages."""

from __future__ import annotations

FENCE = "```"
DEFAULT_LANG = "bash"


def wrap_terraform(text: str) -> str:
    """Wrap a terraform plan in a collapsible markdown details block."""
    return (
        "<details><summary>Terraform Plan</summary>\n\n"
        f"{FENCE}hcl\n{text}\n{FENCE}\n"
        "</details>"
    )


def wrap_code(text: str, lang: str | None = None) -> str:
    """Wrap text in a fenced markdown code block, ``bash`` by default."""
    return f"{FENCE}{lang or DEFAULT_LANG}\n{text}\n{FENCE}"