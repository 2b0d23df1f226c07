"""
The scan -> detect -> fetch -> merge -> reconcile -> write pipeline.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import httpx

from smartignore.config import Settings
from smartignore.detector import detect
from smartignore.fetcher import TemplateFetcher, create_client
from smartignore.merger import merge_templates
from smartignore.models import (
    FetchOutcome,
    GenerationReport,
    MergedDocument,
    TemplateBody,
    WriteMode,
)
from smartignore.reconciler import read_existing, reconcile, write
from smartignore.scanner import DirectoryScanner
from smartignore.templates import ESSENTIAL_HEADER, LocalTemplates

logger = logging.getLogger(__name__)

GITIGNORE_NAME = ".gitignore"


def essential_body(local: LocalTemplates) -> TemplateBody:
    return TemplateBody.from_text(local.essential(), label="essential", header=ESSENTIAL_HEADER)


def build_document(stacks: List[str], fetcher: TemplateFetcher) -> Tuple[MergedDocument, FetchOutcome]:
    """
    Merge the essential rules with the stack templates. With no stacks the
    default template already carries the essential rules and stands alone.
    """
    outcome = fetcher.fetch(stacks)
    bodies = list(outcome.bodies)
    if stacks:
        bodies.insert(0, essential_body(fetcher.local))
    return merge_templates(bodies), outcome


def generate_ignore_file(target_dir, force: bool = False, *,
                         settings: Optional[Settings] = None,
                         client: Optional[httpx.Client] = None,
                         dry_run: bool = False) -> GenerationReport:
    """
    Detect the stacks in `target_dir` and write (or merge into) its .gitignore.

    Raises ScanError if the directory cannot be listed and WriteError if the
    file cannot be written; provider failures only change which tier is used.
    """
    settings = settings or Settings()
    root = Path(target_dir)
    gitignore_path = root / GITIGNORE_NAME

    names = DirectoryScanner(str(root)).scan()
    stacks = detect(names)
    if stacks:
        logger.info("Detected stacks: %s", ", ".join(stacks))
    else:
        logger.info("No stack detected in %s", root)

    owns_client = client is None
    if owns_client:
        client = create_client(settings)
    try:
        fetcher = TemplateFetcher.from_settings(settings, client)
        document, outcome = build_document(stacks, fetcher)
    finally:
        if owns_client:
            client.close()

    existing = read_existing(gitignore_path)
    content, mode = reconcile(None if force else existing, document, stacks)
    if mode == WriteMode.CREATED and existing is not None:
        mode = WriteMode.OVERWRITTEN

    written = False
    if not dry_run and mode != WriteMode.UNCHANGED:
        write(gitignore_path, content)
        written = True

    return GenerationReport(
        path=str(gitignore_path),
        stacks=stacks,
        tier=outcome.tier,
        mode=mode,
        content=content,
        written=written,
    )
