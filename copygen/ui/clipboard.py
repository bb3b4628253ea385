"""Copy generated content to the user's clipboard."""

import json
import logging
from collections.abc import Callable

from copygen.errors import ClipboardUnavailableError
from copygen.ui.notifications import Notifier, copied_notification, copy_failed_notification

logger = logging.getLogger(__name__)


def browser_copy_script(text: str) -> str:
    """Build an HTML snippet that writes ``text`` to the browser clipboard.

    The text is embedded as a JSON string literal; ``</`` is escaped so the
    content cannot close the script element.
    """
    literal = json.dumps(text).replace("</", "<\\/")
    return f"<script>navigator.clipboard.writeText({literal});</script>"


class ClipboardExporter:
    """Writes the held result text through a clipboard writer and reports the outcome.

    The writer receives the raw text and raises ClipboardUnavailableError
    when it cannot deliver it.
    """

    def __init__(self, notifier: Notifier, writer: Callable[[str], None]):
        self.notifier = notifier
        self.writer = writer

    def export(self, content: str) -> bool:
        """Copy ``content`` verbatim.

        Returns:
            True if the writer accepted the text. Empty content is not
            copied and produces no notification.
        """
        if not content:
            return False

        try:
            self.writer(content)
        except ClipboardUnavailableError as e:
            logger.error(f"Clipboard unavailable: {e}")
            self.notifier.notify(copy_failed_notification(str(e) or None))
            return False

        logger.debug(f"Copied {len(content)} characters to clipboard")
        self.notifier.notify(copied_notification())
        return True
