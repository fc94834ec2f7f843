"""
Atlassian Document Format (ADF) utilities.

REST v3 carries rich-text fields such as issue descriptions and comment
bodies as ADF documents. Outgoing plain text is wrapped into a document,
incoming documents are flattened back to plain text for the projections.
"""

from typing import Any

# Block nodes whose text is separated from the following block by a newline
_BLOCK_NODES = {
    "heading",
    "blockquote",
    "codeBlock",
    "listItem",
    "bulletList",
    "orderedList",
    "panel",
    "rule",
    "table",
    "tableRow",
}


def text_to_adf(text: str) -> dict[str, Any]:
    """
    Convert plain text to an ADF document.

    Blank lines separate paragraphs; single newlines inside a paragraph
    become hard breaks.

    Args:
        text: Plain text to convert

    Returns:
        ADF document structure
    """
    paragraphs: list[dict[str, Any]] = []
    for block in text.split("\n\n"):
        if not block.strip():
            continue
        content: list[dict[str, Any]] = []
        for index, line in enumerate(block.split("\n")):
            if index:
                content.append({"type": "hardBreak"})
            if line:
                content.append({"type": "text", "text": line})
        paragraphs.append({"type": "paragraph", "content": content})

    if not paragraphs:
        paragraphs.append({"type": "paragraph", "content": []})

    return {"type": "doc", "version": 1, "content": paragraphs}


def adf_to_text(adf_content: dict | list | str | None) -> str | None:
    """
    Convert ADF content to plain text.

    Strings are returned unchanged, so payloads from deployments that still
    send wiki markup pass through.

    Args:
        adf_content: ADF document (dict), content list, string, or None

    Returns:
        Plain text string or None if no content
    """
    if adf_content is None:
        return None

    if isinstance(adf_content, str):
        return adf_content

    if isinstance(adf_content, list):
        text = "".join(_node_text(node) for node in adf_content)
        return text.strip("\n") or None

    if isinstance(adf_content, dict):
        text = _node_text(adf_content)
        return text.strip("\n") or None

    return None


def _node_text(node: Any) -> str:
    if not isinstance(node, dict):
        return ""

    node_type = node.get("type")
    if node_type == "text":
        return str(node.get("text", ""))
    if node_type == "hardBreak":
        return "\n"
    if node_type == "mention":
        return str(node.get("attrs", {}).get("text", ""))

    children = node.get("content") or []
    text = "".join(_node_text(child) for child in children)
    # Paragraphs are separated by a blank line, mirroring text_to_adf
    if node_type == "paragraph":
        return f"{text}\n\n" if text else ""
    if node_type in _BLOCK_NODES and text and not text.endswith("\n"):
        text += "\n"
    return text
