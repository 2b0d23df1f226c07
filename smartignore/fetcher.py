"""
Template sources and the fallback chain that picks between them.

Priority: GitHub (per stack, with a local file for stacks GitHub lacks)
-> gitignore.io (one batched call) -> a single local template.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import httpx

from smartignore.config import Settings
from smartignore.errors import ProviderUnavailableError, TemplateNotFoundError
from smartignore.models import FetchOutcome, FetchTier, TemplateBody
from smartignore.registry import GITHUB_TEMPLATE_MAP, VALID_STACKS
from smartignore.templates import LocalTemplates

logger = logging.getLogger(__name__)

# gitignore.io answers unknown stacks with 200 and an error text.
_API_ERROR_MARKERS = ("ERROR:", "is undefined")


def create_client(settings: Settings) -> httpx.Client:
    return httpx.Client(
        timeout=settings.timeout_seconds,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )


def normalize_stacks(stacks: Iterable[str]) -> List[str]:
    """Lowercase, strip and de-duplicate, keeping first-seen order."""
    seen = []
    for stack in stacks:
        normalized = stack.strip().lower()
        if normalized and normalized not in seen:
            seen.append(normalized)
    return seen


def filter_valid_stacks(stacks: Iterable[str]) -> List[str]:
    """Stacks gitignore.io accepts, sorted; unknown ones (npm, docker, ...) are dropped."""
    return sorted(stack for stack in normalize_stacks(stacks) if stack in VALID_STACKS)


class GitHubTemplateProvider:
    """Raw templates from the github/gitignore repository, one file per stack."""

    def __init__(self, client: httpx.Client, base_url: str):
        self.client = client
        self.base_url = base_url.rstrip("/")

    def fetch(self, template_name: str) -> str:
        url = f"{self.base_url}/{template_name}.gitignore"
        try:
            response = self.client.get(url)
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(f"GitHub request for {template_name} failed: {exc}") from exc

        if response.status_code != 200:
            raise TemplateNotFoundError(
                f"Template {template_name} not found on GitHub (status {response.status_code})"
            )
        content = response.text.strip()
        if not content:
            raise TemplateNotFoundError(f"Empty response from GitHub for {template_name}")
        return content


class GitignoreIoProvider:
    """The gitignore.io API, which renders several stacks in one response."""

    def __init__(self, client: httpx.Client, base_url: str):
        self.client = client
        self.base_url = base_url.rstrip("/")

    def fetch(self, stacks: List[str]) -> str:
        url = f"{self.base_url}/{','.join(stacks)}"
        try:
            response = self.client.get(url)
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(f"gitignore.io request failed: {exc}") from exc

        data = response.text
        if any(marker in data for marker in _API_ERROR_MARKERS):
            raise ProviderUnavailableError("API returned error: one or more stacks are invalid")
        if response.status_code != 200:
            raise ProviderUnavailableError(f"API returned status {response.status_code}")
        if not data.strip():
            raise ProviderUnavailableError("Empty API response")
        return data


class TemplateFetcher:
    """
    Produces the stack template bodies for a batch of stack identifiers.

    `fetch` never raises for provider problems; the returned FetchOutcome
    records which tier supplied the content and which stacks got nothing.
    """

    def __init__(self, github: GitHubTemplateProvider, gitignore_io: GitignoreIoProvider,
                 local: LocalTemplates):
        self.github = github
        self.gitignore_io = gitignore_io
        self.local = local

    @classmethod
    def from_settings(cls, settings: Settings, client: httpx.Client) -> "TemplateFetcher":
        return cls(
            GitHubTemplateProvider(client, settings.github_url),
            GitignoreIoProvider(client, settings.api_url),
            LocalTemplates(settings.templates_dir),
        )

    def fetch(self, stacks: Iterable[str]) -> FetchOutcome:
        stacks = normalize_stacks(stacks)
        if not stacks:
            body = TemplateBody.from_text(self.local.default(), label="default")
            return FetchOutcome(tier=FetchTier.DEFAULT, bodies=[body])

        outcome = self._from_github(stacks)
        if outcome is not None:
            return outcome
        logger.warning("No templates obtained from GitHub, trying gitignore.io")

        outcome = self._from_gitignore_io(stacks)
        if outcome is not None:
            return outcome
        logger.warning("Using local template as fallback")

        return self._from_local_fallback(stacks)

    def _from_github(self, stacks: List[str]) -> Optional[FetchOutcome]:
        bodies: List[TemplateBody] = []
        missing: List[str] = []
        attempts = unreachable = remote_hits = 0

        for stack in stacks:
            body = None
            template_name = GITHUB_TEMPLATE_MAP.get(stack)
            if template_name is None:
                logger.debug("%s has no GitHub template, looking for a local one", stack)
            else:
                attempts += 1
                try:
                    content = self.github.fetch(template_name)
                except TemplateNotFoundError as e:
                    logger.warning("%s", e)
                except ProviderUnavailableError as e:
                    unreachable += 1
                    logger.warning("%s", e)
                else:
                    remote_hits += 1
                    body = TemplateBody.from_text(content, label=template_name,
                                                  header=f"# {template_name}")
                    logger.info("Fetched %s template from GitHub", template_name)

            if body is None:
                body = self._local_body(stack)
            if body is None:
                missing.append(stack)
            else:
                bodies.append(body)

        if not bodies:
            return None
        if attempts and remote_hits == 0 and unreachable == attempts:
            # GitHub is down; local bodies alone would hide every remote stack.
            return None
        return FetchOutcome(tier=FetchTier.GITHUB, bodies=bodies, missing=missing)

    def _from_gitignore_io(self, stacks: List[str]) -> Optional[FetchOutcome]:
        valid = filter_valid_stacks(stacks)
        if not valid:
            logger.warning("None of %s is known to gitignore.io", ", ".join(stacks))
            return None
        try:
            content = self.gitignore_io.fetch(valid)
        except ProviderUnavailableError as e:
            logger.warning("Error fetching from gitignore.io API: %s", e)
            return None

        logger.info("Fetched %s from gitignore.io", ", ".join(valid))
        body = TemplateBody.from_text(content, label="gitignore.io")
        missing = [stack for stack in stacks if stack not in valid]
        return FetchOutcome(tier=FetchTier.GITIGNORE_IO, bodies=[body], missing=missing)

    def _from_local_fallback(self, stacks: List[str]) -> FetchOutcome:
        label, content = self.local.fallback(stacks)
        body = TemplateBody.from_text(content, label=label)
        covered = label[: -len(" (local)")] if label.endswith(" (local)") else None
        missing = [stack for stack in stacks if stack != covered]
        return FetchOutcome(tier=FetchTier.LOCAL_FALLBACK, bodies=[body], missing=missing)

    def _local_body(self, stack: str) -> Optional[TemplateBody]:
        content = self.local.get(stack)
        if content is None:
            return None
        label = f"{stack} (local)"
        return TemplateBody.from_text(content, label=label, header=f"# {label}")
