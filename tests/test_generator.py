import pytest

from smartignore.errors import ScanError, WriteError
from smartignore.generator import generate_ignore_file
from smartignore.models import FetchTier, WriteMode
from smartignore.reconciler import render_header
from smartignore.templates import BASIC_TEMPLATE, ESSENTIAL_HEADER


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    return root


def test_creates_gitignore_from_github(project, settings, make_client):
    (project / "go.mod").write_text("module x\n", encoding="utf-8")
    client = make_client({"/github/Go.gitignore": (200, "# Binaries\n*.exe\n*.log\n")})

    report = generate_ignore_file(project, settings=settings, client=client)

    content = (project / ".gitignore").read_text(encoding="utf-8")
    assert report.written
    assert report.mode == WriteMode.CREATED
    assert report.tier == FetchTier.GITHUB
    assert report.stacks == ["go"]
    assert content == report.content
    assert content.startswith(render_header(["go"]) + ESSENTIAL_HEADER + "\n# OS\n")
    assert content.endswith("\n\n# Go\n# Binaries\n*.exe\n")
    # *.log is part of the essential block and appears once
    assert content.count("*.log") == 1


def test_empty_directory_uses_default_template_alone(project, settings, make_client):
    client = make_client()

    report = generate_ignore_file(project, settings=settings, client=client)

    assert report.stacks == []
    assert report.tier == FetchTier.DEFAULT
    assert report.content == render_header([]) + BASIC_TEMPLATE
    assert client.requested == []


def test_all_providers_down_still_produces_content(project, settings, make_client):
    (project / "package.json").write_text("{}", encoding="utf-8")

    report = generate_ignore_file(project, settings=settings, client=make_client(down=True))

    assert report.tier == FetchTier.LOCAL_FALLBACK
    assert report.written
    body = report.content[len(render_header(["node"])):]
    assert body.strip()
    assert "node_modules/" in body


def test_existing_file_is_merged_then_left_alone(project, settings, make_client):
    (project / "package.json").write_text("{}", encoding="utf-8")
    (project / ".gitignore").write_text("node_modules/\nmy-secrets.txt\n", encoding="utf-8")
    routes = {"/github/Node.gitignore": (200, "node_modules/\ndist/\n")}

    first = generate_ignore_file(project, settings=settings, client=make_client(routes))
    after_first = (project / ".gitignore").read_text(encoding="utf-8")
    second = generate_ignore_file(project, settings=settings, client=make_client(routes))

    assert first.mode == WriteMode.MERGED
    assert after_first.startswith("node_modules/\nmy-secrets.txt\n\n# --- smart-gitignore: added for node ---\n")
    assert after_first.endswith("dist/\n")
    assert after_first.count("node_modules/") == 1
    assert second.mode == WriteMode.UNCHANGED
    assert not second.written
    assert (project / ".gitignore").read_text(encoding="utf-8") == after_first


def test_force_overwrites_existing_file(project, settings, make_client):
    (project / ".gitignore").write_text("only-mine\n", encoding="utf-8")

    report = generate_ignore_file(project, force=True, settings=settings, client=make_client())

    content = (project / ".gitignore").read_text(encoding="utf-8")
    assert report.mode == WriteMode.OVERWRITTEN
    assert "only-mine" not in content
    assert content.startswith(render_header([]))


def test_dry_run_does_not_write(project, settings, make_client):
    report = generate_ignore_file(project, settings=settings, client=make_client(), dry_run=True)
    assert not report.written
    assert not (project / ".gitignore").exists()
    assert report.content


def test_generation_is_deterministic(project, settings, make_client):
    (project / "pom.xml").write_text("<project/>", encoding="utf-8")
    routes = {
        "/github/Java.gitignore": (200, "*.class\n*.jar\n"),
        "/github/Maven.gitignore": (200, "target/\n*.jar\n"),
    }
    first = generate_ignore_file(project, settings=settings, client=make_client(routes), dry_run=True)
    second = generate_ignore_file(project, settings=settings, client=make_client(routes), dry_run=True)
    assert first.content == second.content
    assert first.content.count("*.jar") == 1


def test_missing_directory_raises_scan_error(tmp_path, settings, make_client):
    with pytest.raises(ScanError):
        generate_ignore_file(tmp_path / "missing", settings=settings, client=make_client())


def test_unwritable_target_raises_write_error(project, settings, make_client):
    (project / ".gitignore").mkdir()
    with pytest.raises(WriteError):
        generate_ignore_file(project, force=True, settings=settings, client=make_client())
