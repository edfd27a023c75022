"""
Best-effort lexical scan of TypeScript declaration files.

This is pattern matching, not parsing. It picks up simple indented
property declarations and `onXxx: (...)` event handlers; nested braces,
multi-line types and generics may be missed or truncated. Anything that
does not fit the patterns is skipped without error.
"""

import re
from typing import List, Optional
import logging

from eldocs.schemas import (
    ComponentEvent,
    ComponentProp,
    DeclarationScan,
    TypeInfo,
    classify_type,
)

logger = logging.getLogger(__name__)


class DeclarationScanner:
    """
    Extract props and events from declaration text.

    Example:
        >>> scan = DeclarationScanner().scan("  size?: 'large' | 'small'")
        >>> scan.props[0].required
        False
    """

    # `<indent><name>[?]: <type>` up to a terminator; no braces, arrows or assignments
    PROP_PATTERN = re.compile(
        r"^[ \t]+(\w+)\??:\s*([^;{}=>\n]+)",
        re.MULTILINE
    )

    # `on<Capitalized>[?]: (<params>)`
    EVENT_PATTERN = re.compile(
        r"on([A-Z]\w*)\??:\s*\(([^)]+)\)"
    )

    # Function-call or constructor signals in a type expression
    CALLABLE_SIGNALS = ("(", "new ")

    TRAILING_COMMENT = re.compile(r"\s*(?:\*|//).*$")

    def scan(self, text: Optional[str]) -> DeclarationScan:
        """
        Scan declaration text.

        Args:
            text: Declaration source; None or empty yields an empty scan

        Returns:
            DeclarationScan (slots are always empty)
        """
        if not text:
            return DeclarationScan()

        props = self._scan_props(text)
        events = self._scan_events(text)
        logger.debug(f"Scanned {len(props)} props and {len(events)} events from declarations")
        return DeclarationScan(props=props, events=events)

    def _scan_props(self, text: str) -> List[ComponentProp]:
        props = []
        for match in self.PROP_PATTERN.finditer(text):
            name = match.group(1)
            type_text = match.group(2).strip()

            if any(signal in type_text for signal in self.CALLABLE_SIGNALS):
                continue

            type_text = self.TRAILING_COMMENT.sub("", type_text).strip()
            if not type_text:
                continue

            props.append(ComponentProp(
                name=name,
                type=classify_type(type_text, ts=match.group(0).strip()),
                # Whole-text check: an optional marker anywhere counts
                required=f"{name}?:" not in text,
            ))
        return props

    def _scan_events(self, text: str) -> List[ComponentEvent]:
        events = []
        for match in self.EVENT_PATTERN.finditer(text):
            events.append(ComponentEvent(
                name=match.group(1).lower(),
                parameters=[TypeInfo(raw=match.group(2))],
                ts=match.group(0),
            ))
        return events


def scan_declarations(text: Optional[str]) -> DeclarationScan:
    """Convenience function wrapping DeclarationScanner.scan."""
    return DeclarationScanner().scan(text)
