import logging
from typing import Optional

from wordharvest.core.config.settings import settings
from wordharvest.core.common.errors import UnsupportedExtensionError

from ..domain.interfaces import ICapabilityProbe, IExtensionMatcher
from ..domain.models import ExtensionSet
from ..data.capability_probe import ExecutableProbe
from ..data.regex_matcher import RegexExtensionMatcher

logger = logging.getLogger(__name__)


def pdf_probe() -> ExecutableProbe:
    return ExecutableProbe("pdftotext", settings.PDFTOTEXT_CANDIDATES)


def build_allow_list(probe: Optional[ICapabilityProbe] = None) -> ExtensionSet:
    """
    Builds the set of extensions the harvester is able to read.
    Plain-text suffixes are always allowed; 'pdf' only when a PDF-to-text helper is installed.
    """
    if probe is None:
        probe = pdf_probe()

    allowed = list(settings.ALWAYS_ALLOWED_EXTENSIONS)
    if probe.is_available():
        allowed.append(settings.PDF_EXTENSION)
    else:
        logger.debug("No PDF-to-text helper detected, 'pdf' will not be allowed.")

    return ExtensionSet.of(allowed)


def parse_extension_list(value: str, allow_list: ExtensionSet) -> ExtensionSet:
    """
    Parses a colon-separated selection such as "txt:asc".

    Every token must be an exact, case-sensitive member of allow_list.
    The first unknown token rejects the whole selection.

    Raises:
        UnsupportedExtensionError: on the first token not in allow_list.
    """
    if value is None:
        raise UnsupportedExtensionError("")

    selected = []
    for token in value.split(":"):
        if token not in allow_list:
            logger.error(f"Extension '{token}' not allowed.")
            raise UnsupportedExtensionError(token)
        selected.append(token)

    return ExtensionSet.of(selected)


def compile_matcher(extension_set: ExtensionSet) -> IExtensionMatcher:
    return RegexExtensionMatcher(extension_set)
