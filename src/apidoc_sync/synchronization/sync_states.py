"""Synchronization state entities."""

from __future__ import annotations

from enum import Enum


class SyncRole(str, Enum):
    """Which representation currently drives the other.

    PARSE_ERROR holds while the text does not parse: the text is kept
    verbatim, the last valid document stays, and tree edits are ignored.
    """

    IDLE = "idle"
    TEXT_AUTHORITATIVE = "text_authoritative"
    TREE_AUTHORITATIVE = "tree_authoritative"
    PARSE_ERROR = "parse_error"


class EchoSuppression(str, Enum):
    """One-shot handshake between publishing text and the next text notification.

    ARMED after the controller publishes text; the next text-change
    notification disarms it unconditionally and is dropped only if it repeats
    the published text.
    """

    ARMED = "armed"
    DISARMED = "disarmed"
