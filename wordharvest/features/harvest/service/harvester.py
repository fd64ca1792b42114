import logging
from concurrent.futures import ThreadPoolExecutor, Future
from pathlib import Path
from typing import List, Optional

from wordharvest.core.common.errors import (
    DirectoryUnreadableError,
    TruncatedReadError,
    ContentOutOfMemoryError,
)
from wordharvest.core.config.settings import settings
from wordharvest.features.extensions.service.api import compile_matcher
from wordharvest.features.source_scanner.domain.interfaces import IDirectoryWalker
from wordharvest.features.source_scanner.data.directory_walker import RecursiveDirectoryWalker
from wordharvest.features.content_reader.domain.interfaces import IContentReader
from wordharvest.features.content_reader.service.api import ContentReaderRouter
from wordharvest.features.tokenizer.domain.interfaces import ITokenizer
from wordharvest.features.tokenizer.data.byte_tokenizer import ByteTokenizer
from wordharvest.features.word_set.domain.interfaces import IWordSet
from wordharvest.features.word_set.data.hash_word_set import HashWordSet, LockedWordSet
from wordharvest.features.word_sink.data.file_sink import FileWordSink

from ..domain.models import HarvestRequest, HarvestSummary, FileOutcome

logger = logging.getLogger(__name__)

class WordHarvester:
    """
    Walks a tree and writes every distinct word found in matching files,
    in first-seen order, to the output file.
    """

    def __init__(self,
                 walker: Optional[IDirectoryWalker] = None,
                 reader: Optional[IContentReader] = None,
                 pdftotext: Optional[Path] = None):
        self.walker = walker or RecursiveDirectoryWalker()
        self.reader = reader
        # Helper located once at startup; None means PDFs are tokenised as raw bytes
        self.pdftotext = pdftotext

    def harvest(self, request: HarvestRequest) -> HarvestSummary:
        """
        Runs one harvest.

        Per-file and per-directory failures are logged, recorded in the summary
        and do not stop the run.

        Raises:
            OutputUnavailableError: the output file cannot be opened.
        """
        summary = HarvestSummary()
        matcher = compile_matcher(request.extensions)
        tokenizer = ByteTokenizer(request.min_word_length)
        reader = self.reader or self._default_reader(request)
        parallel = request.workers > 1
        words: IWordSet = LockedWordSet() if parallel else HashWordSet()

        def on_directory_error(error: DirectoryUnreadableError) -> None:
            logger.error(str(error))
            summary.directories_failed += 1
            summary.errors.append(str(error))

        logger.info(f"Starting harvest of {request.root_path} [{request.extensions}] -> {request.output_path}")

        with FileWordSink(request.output_path) as sink:
            # The output may live inside the tree and match the filter; it is never an input
            output_file = request.output_path.resolve()

            if parallel:
                self._harvest_parallel(request, matcher, reader, tokenizer, words, sink, summary,
                                       on_directory_error, output_file)
            else:
                def visit(path: Path) -> None:
                    if self._is_output(path, output_file):
                        return
                    summary.record(self._harvest_file(path, reader, tokenizer, words, sink))

                self.walker.walk(request.root_path, matcher, visit, on_directory_error)

        logger.info(
            f"Harvest complete. {summary.words_written} unique words from "
            f"{summary.files_harvested}/{summary.files_visited} files "
            f"({summary.files_failed} files, {summary.directories_failed} directories failed)."
        )
        return summary

    def _harvest_parallel(self, request, matcher, reader, tokenizer, words, sink, summary,
                          on_directory_error, output_file: Path) -> None:
        """
        One task per matching file. Directory listing stays on the calling thread.
        Line order follows whichever worker inserts a word first.
        """
        futures: List[Future] = []

        with ThreadPoolExecutor(max_workers=request.workers, thread_name_prefix="harvest") as pool:
            def visit(path: Path) -> None:
                if self._is_output(path, output_file):
                    return
                futures.append(pool.submit(self._harvest_file, path, reader, tokenizer, words, sink))

            self.walker.walk(request.root_path, matcher, visit, on_directory_error)

        # Re-raises sink failures from the workers
        for future in futures:
            summary.record(future.result())

    def _harvest_file(self,
                      path: Path,
                      reader: IContentReader,
                      tokenizer: ITokenizer,
                      words: IWordSet,
                      sink: FileWordSink) -> FileOutcome:
        try:
            content = reader.read_all(path)
        except (TruncatedReadError, ContentOutOfMemoryError) as e:
            logger.warning(str(e))
            return FileOutcome(path=path, error=str(e))

        seen = 0
        new = 0
        for word in tokenizer.tokenize(content.data):
            seen += 1
            if words.insert(word):
                sink.write(word)
                new += 1

        logger.debug(f"{path}: {seen} words, {new} new")
        return FileOutcome(path=path, words_seen=seen, words_new=new)

    @staticmethod
    def _is_output(path: Path, output_file: Path) -> bool:
        if path.name != output_file.name:
            return False
        if path.resolve() == output_file:
            logger.debug(f"Skipping output file {path}")
            return True
        return False

    def _default_reader(self, request: HarvestRequest) -> IContentReader:
        if settings.PDF_EXTENSION in request.extensions:
            return ContentReaderRouter.with_pdf_support(self.pdftotext)
        return ContentReaderRouter()
