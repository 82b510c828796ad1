"""Plain-text panels for verdicts."""

from .models import CompatibleVerdict, IncompatibleVerdict, UnrecognizedVerdict, Verdict

DIVIDER = "-" * 48


def _panel(heading: str, *sections: list[str]) -> str:
    lines = [heading]
    for section in sections:
        lines.append(DIVIDER)
        lines.extend(section)
    return "\n".join(lines)


def render_warning(verdict: IncompatibleVerdict, preview: bool = False) -> str:
    """Render the wrong-chain warning for an incompatible destination."""
    heading = "🚨 Wrong Chain Detected!" + (" (Preview)" if preview else "")
    return _panel(
        heading,
        [
            f"You are on: {verdict.chain_name}",
            f"Address looks like: {verdict.network_name}",
        ],
        [f"⚠️ {verdict.warning}"],
        ["Your funds will be permanently lost if you proceed."],
        [
            "What to do instead:",
            "❌ Cancel this transaction immediately",
            "🌉 Use a bridge to send cross-chain:",
            *(f"→ {bridge}" for bridge in verdict.bridges),
        ],
        ["Destination address:", verdict.address],
    )


def render_compatible(verdict: CompatibleVerdict) -> str:
    return _panel(
        "✅ Address Looks Compatible",
        [f"Network: {verdict.chain_name}"],
        [
            "The destination address format is compatible with this network.",
            "Always verify the full address before confirming.",
        ],
        ["Sending to:", verdict.address],
    )


def render_unrecognized(verdict: UnrecognizedVerdict) -> str:
    return _panel(
        "⚠️ Unrecognized Address",
        [
            f"Network: {verdict.chain_name}",
            "This address format is not recognized.",
            "Proceed only if you are certain this address is correct for this network.",
        ],
        ["Destination address:", verdict.address],
    )


def render_verdict(verdict: Verdict, preview: bool = False) -> str:
    """Render any verdict as a text panel.

    Args:
        verdict: Result of ``evaluate``
        preview: Mark warnings as previews (no transaction pending)

    Returns:
        Multi-line panel text
    """
    if isinstance(verdict, IncompatibleVerdict):
        return render_warning(verdict, preview=preview)
    if isinstance(verdict, CompatibleVerdict):
        return render_compatible(verdict)
    return render_unrecognized(verdict)
