from pathlib import Path
from typing import Optional

from wordharvest.core.config.settings import settings
from wordharvest.features.extensions.service.api import build_allow_list, parse_extension_list, pdf_probe
from ..domain.models import HarvestRequest, HarvestSummary
from .harvester import WordHarvester

def run_harvest(root: str,
                output: str,
                extensions: str = "txt",
                workers: Optional[int] = None,
                min_word_length: Optional[int] = None) -> HarvestSummary:
    """
    Standalone API: harvests words under root into output.

    extensions is a colon-separated selection, e.g. "txt:asc". It is checked
    against the allow-list before anything is opened or walked.
    """
    probe = pdf_probe()
    selected = parse_extension_list(extensions, build_allow_list(probe))

    request = HarvestRequest(
        root_path=Path(root),
        output_path=Path(output),
        extensions=selected,
        workers=workers if workers is not None else settings.WORKERS,
        min_word_length=min_word_length if min_word_length is not None else settings.MIN_WORD_LENGTH,
    )
    return WordHarvester(pdftotext=probe.find()).harvest(request)
