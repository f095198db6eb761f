"""
API module for column alignment.
Provides the host-facing entry points: a pure text function and a thin
selection adapter that enforces the host preconditions.
"""

from typing import Optional, Union
import logging
import os

from .core.indenter import Indenter, IndentResult
from .languages import Language, normalize_extension

SELECTION_NOTICE = "Please select some text in active document."

logger = logging.getLogger(__name__)


class EmptySelectionError(ValueError):
    """Raised when there is no usable selection to align.

    Covers both "no active document" and an empty / whitespace-only
    selection; hosts report either case with the same notice.
    """

    def __init__(self, message: str = SELECTION_NOTICE):
        super().__init__(message)


def resolve_language(
    extension: Optional[str] = None, language: Union[Language, str, None] = None
) -> Language:
    """Pick the tokenization variant.

    An explicit `language` (member or name) wins over the extension hint.
    """
    if isinstance(language, Language):
        return language
    if language:
        return Language.from_name(language)
    return Language.from_extension(extension)


def align_text(
    text: str,
    extension: Optional[str] = None,
    language: Union[Language, str, None] = None,
) -> str:
    """Realign `text` into columns, choosing the tokenizer from the hint"""
    return Indenter(resolve_language(extension, language)).apply(text)


class SelectionAligner:
    """Host adapter around the column aligner.

    The host hands over the selected text and gets back the replacement
    string, which it substitutes for the selection verbatim.
    """

    def __init__(
        self,
        extension: Optional[str] = None,
        language: Union[Language, str, None] = None,
    ):
        self.extension = normalize_extension(extension)
        self.language = resolve_language(self.extension, language)
        self._indenter = Indenter(self.language)

    @classmethod
    def for_path(
        cls, path: Optional[str], language: Union[Language, str, None] = None
    ) -> "SelectionAligner":
        """Build an adapter from the active document's path"""
        if path is None:
            raise EmptySelectionError()
        extension = os.path.splitext(path)[1]
        return cls(extension=extension, language=language)

    @staticmethod
    def check_selection(selection: Optional[str]) -> str:
        """Validate the host precondition and return the selection"""
        if selection is None or not selection.strip():
            raise EmptySelectionError()
        return selection

    def align(self, selection: Optional[str]) -> IndentResult:
        selection = self.check_selection(selection)
        result = self._indenter.align(selection)
        logger.debug(
            f"Aligned {result.total_lines} lines as {self.language.label} "
            f"({result.changed_lines} changed)"
        )
        return result

    def replace_selection(self, selection: Optional[str]) -> str:
        """Return the text that should replace `selection`.

        Raises:
            EmptySelectionError: selection missing, empty or whitespace-only
        """
        return self.align(selection).text
