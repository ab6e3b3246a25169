"""Plain-text report of scan results."""

from meaning_words.data import AggregateResult
from meaning_words.export import rank
from meaning_words.url import shorten_url


def format_report(result: AggregateResult, *, show_examples: bool = True) -> str:
    """Render ranked phrases with counts and shortened example URLs.

    Args:
        result: Scan result to render.
        show_examples: Whether to list example URLs under each phrase.

    Returns:
        Multi-line report starting with a summary line.
    """
    ranked = rank(result)
    lines = [f"Found {len(ranked)} unique words."]
    if not ranked:
        return lines[0]

    width = max(len(phrase) for phrase, _ in ranked)
    for phrase, count in ranked:
        lines.append(f"{phrase:<{width}}  {count:>5}")
        if show_examples:
            lines.extend(f"    {shorten_url(url)}" for url in result.examples.get(phrase, ()))
    return "\n".join(lines)
