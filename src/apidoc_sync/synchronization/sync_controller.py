"""Text/tree synchronization controller.

The controller owns the authoritative pair of raw text and parsed document.
Text edits are parsed after a quiet period (only the last text of a burst
is parsed); structural edits replace the document at once. Every document
change is serialized back to text in the format that produced the document,
and the text surface's echo of that write is recognised and dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from apidoc_sync.configuration.runtime_settings import EditorSettings
from apidoc_sync.document_codec import (
    SAMPLE_DOCUMENT,
    DocumentFormat,
    DocumentParseError,
    DocumentSerializationError,
    parse_document,
    serialize_document,
)
from apidoc_sync.document_mutation import (
    PathLike,
    PropertyKind,
    add_item,
    add_schema_property,
    remove_item,
    rename_key,
    toggle_required,
    update,
)

from .edit_coalescing import CallLaterScheduler, EditCoalescer
from .sync_states import EchoSuppression, SyncRole

logger = logging.getLogger(__name__)

TextListener = Callable[[str], None]
DocumentListener = Callable[[Mapping[str, Any]], None]
Unsubscribe = Callable[[], None]


class SyncController:
    """Keep raw text and the parsed document of one API description consistent."""

    def __init__(
        self,
        initial_text: str | None = None,
        *,
        settings: EditorSettings | None = None,
        scheduler: CallLaterScheduler | None = None,
    ) -> None:
        self._settings = settings or EditorSettings()
        self._text = ""
        self._published_text: str | None = None
        self._document: Mapping[str, Any] | None = None
        self._document_format = self._settings.default_format
        self._parse_error: str | None = None
        self._role = SyncRole.IDLE
        self._echo_suppression = EchoSuppression.DISARMED
        self._text_listeners: list[TextListener] = []
        self._document_listeners: list[DocumentListener] = []
        self._parse_coalescer: EditCoalescer[str] = EditCoalescer(
            self._parse_text, self._settings.debounce_seconds, scheduler
        )
        self.load_text(SAMPLE_DOCUMENT if initial_text is None else initial_text)

    @property
    def settings(self) -> EditorSettings:
        return self._settings

    @property
    def text(self) -> str:
        return self._text

    @property
    def document(self) -> Mapping[str, Any] | None:
        """Last valid document snapshot; treat it as read-only."""
        return self._document

    @property
    def document_format(self) -> DocumentFormat:
        return self._document_format

    @property
    def parse_error(self) -> str | None:
        return self._parse_error

    @property
    def role(self) -> SyncRole:
        return self._role

    @property
    def echo_suppression(self) -> EchoSuppression:
        return self._echo_suppression

    @property
    def has_pending_parse(self) -> bool:
        return self._parse_coalescer.pending

    def subscribe_text(self, listener: TextListener) -> Unsubscribe:
        """Register a sink for text the controller publishes."""
        self._text_listeners.append(listener)
        return lambda: self._text_listeners.remove(listener)

    def subscribe_document(self, listener: DocumentListener) -> Unsubscribe:
        self._document_listeners.append(listener)
        return lambda: self._document_listeners.remove(listener)

    def on_text_changed(self, text: str) -> None:
        """Handle a text-change notification from the text surface.

        The first notification after a publish disarms echo suppression no
        matter what it carries; it is dropped only when it repeats the
        published text. Anything else schedules a coalesced parse.
        """
        if self._echo_suppression is EchoSuppression.ARMED:
            self._echo_suppression = EchoSuppression.DISARMED
            if text == self._published_text:
                logger.debug("Dropped echo of published text.")
                return
        if text == self._text:
            return
        self._text = text
        self._role = SyncRole.TEXT_AUTHORITATIVE
        self._parse_coalescer.submit(text)
        logger.debug("Scheduled parse of %d characters.", len(text))

    def load_text(self, text: str) -> None:
        """Replace the text wholesale (file load, paste, sample) and parse it now."""
        self._parse_coalescer.cancel()
        self._echo_suppression = EchoSuppression.DISARMED
        self._text = text
        self._role = SyncRole.TEXT_AUTHORITATIVE
        self._parse_text(text)

    def load_sample(self) -> None:
        self.load_text(SAMPLE_DOCUMENT)

    def flush(self) -> bool:
        """Parse pending text immediately; return False when nothing was pending."""
        return self._parse_coalescer.flush()

    def convert_to(self, document_format: DocumentFormat) -> bool:
        """Re-publish the current document in another syntax.

        Returns False, with text and format tag unchanged, when the document
        cannot be written in ``document_format``.
        """
        if self._document is None or self._parse_error is not None:
            return False
        if not self._commit(self._document, document_format):
            return False
        self._parse_coalescer.cancel()
        self._role = SyncRole.IDLE
        return True

    def apply_edit(self, mutation: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Apply a document mutation ``mutation(document, *args, **kwargs)``.

        Edits are ignored while the text does not parse, so the user's text
        reaches the sink verbatim. An edit whose result cannot be serialized
        is rejected as a whole. A parse still waiting for its quiet period is
        cancelled. Returns True when the document changed.
        """
        if self._document is None or self._parse_error is not None:
            logger.debug("Ignored structural edit while the text does not parse.")
            return False
        updated = mutation(self._document, *args, **kwargs)
        if updated is self._document:
            return False
        if not isinstance(updated, Mapping):
            logger.debug("Ignored structural edit that would replace the root with a non-mapping.")
            return False
        previous_role = self._role
        self._role = SyncRole.TREE_AUTHORITATIVE
        if not self._commit(updated, self._document_format):
            self._role = previous_role
            return False
        self._parse_coalescer.cancel()
        self._role = SyncRole.IDLE
        return True

    def apply_named_edit(
        self, mutation: Callable[..., tuple[Any, str]], *args: Any, **kwargs: Any
    ) -> str | None:
        """Apply a mutation returning ``(document, key)``; return the key, or None if ignored."""
        added: list[str] = []

        def _mutation(document: Any) -> Any:
            updated, key = mutation(document, *args, **kwargs)
            added.append(key)
            return updated

        return added[0] if self.apply_edit(_mutation) else None

    def update(self, path: PathLike, value: Any) -> bool:
        return self.apply_edit(update, path, value)

    def add_item(self, collection_path: PathLike, item: Any) -> bool:
        return self.apply_edit(add_item, collection_path, item)

    def remove_item(self, path: PathLike) -> bool:
        return self.apply_edit(remove_item, path)

    def rename_key(self, parent_path: PathLike, old_key: str, new_key: str) -> bool:
        return self.apply_edit(rename_key, parent_path, old_key, new_key)

    def toggle_required(
        self, schema_path: PathLike, property_key: str, make_required: bool
    ) -> bool:
        return self.apply_edit(toggle_required, schema_path, property_key, make_required)

    def add_schema_property(self, schema_path: PathLike, kind: PropertyKind) -> str | None:
        """Add a placeholder property; return its key, or None when the edit was ignored."""
        return self.apply_named_edit(add_schema_property, schema_path, kind)

    def download_name(self) -> str:
        return self._document_format.download_name

    def media_type(self) -> str:
        return self._document_format.media_type

    def _parse_text(self, text: str) -> None:
        try:
            parsed = parse_document(text)
        except DocumentParseError as exc:
            self._enter_parse_error(str(exc) or "Invalid YAML or JSON format.")
            return
        self._parse_error = None
        if not self._commit(parsed.document, parsed.document_format):
            self._enter_parse_error(
                f"Document cannot be written back as {parsed.document_format.value}."
            )
            return
        self._role = SyncRole.IDLE

    def _enter_parse_error(self, message: str) -> None:
        self._parse_error = message
        self._role = SyncRole.PARSE_ERROR
        logger.info("Document text does not parse: %s", message)

    def _commit(self, document: Mapping[str, Any], document_format: DocumentFormat) -> bool:
        """Serialize first, then adopt document, format tag and text together."""
        try:
            text = serialize_document(document, document_format, indent=self._settings.indent)
        except DocumentSerializationError:
            logger.exception("Error serializing document; keeping previous text and document.")
            return False
        document_changed = document is not self._document
        self._document = document
        self._document_format = document_format
        self._text = text
        self._published_text = text
        self._echo_suppression = EchoSuppression.ARMED
        if document_changed:
            for listener in list(self._document_listeners):
                listener(document)
        for listener in list(self._text_listeners):
            listener(text)
        return True
