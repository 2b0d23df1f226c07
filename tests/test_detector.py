import pytest

from smartignore.detector import detect, detection_table
from smartignore.errors import ScanError
from smartignore.scanner import DirectoryScanner


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    return root


def test_go_mod_only_detects_go(project):
    (project / "go.mod").write_text("module example.com/x\n", encoding="utf-8")
    assert detect(DirectoryScanner(str(project)).scan()) == ["go"]


def test_empty_directory_detects_nothing(project):
    assert DirectoryScanner(str(project)).scan() == []
    assert detect([]) == []


def test_marker_with_several_stacks():
    assert detect(["pom.xml"]) == ["java", "maven"]
    assert detect(["composer.json", "manage.py"]) == ["composer", "django", "php", "python"]


def test_result_is_sorted_and_unique():
    assert detect(["yarn.lock", "package.json", "package-lock.json"]) == ["node", "yarn"]


@pytest.mark.parametrize("name,stack", [
    ("Main.java", "java"),
    ("tsconfig.json", "node"),
    ("index.ts", "node"),
    ("App.csproj", "visualstudio"),
    ("Solution.sln", "visualstudio"),
])
def test_name_patterns(name, stack):
    assert stack in detect([name])


def test_unknown_names_are_ignored():
    assert detect(["README.md", "LICENSE", "src"]) == []


def test_scanner_skips_hidden_entries_except_allowed(project):
    (project / ".git").mkdir()
    (project / ".cache").write_text("", encoding="utf-8")
    (project / ".idea").mkdir()
    (project / ".env").write_text("A=1", encoding="utf-8")
    (project / "Dockerfile").write_text("FROM scratch", encoding="utf-8")
    (project / "src").mkdir()

    names = DirectoryScanner(str(project)).scan()

    assert names == [".env", ".idea", "Dockerfile", "src"]
    assert detect(names) == ["docker", "dotenv", "intellij"]


def test_scanner_only_lists_top_level(project):
    nested = project / "backend"
    nested.mkdir()
    (nested / "package.json").write_text("{}", encoding="utf-8")
    assert DirectoryScanner(str(project)).scan() == ["backend"]


def test_scanner_skips_entries_that_are_neither_file_nor_directory(project):
    (project / "go.mod").write_text("", encoding="utf-8")
    (project / "dangling").symlink_to(project / "nowhere")
    scanner = DirectoryScanner(str(project))
    assert scanner.full_path("go.mod") == str(project / "go.mod")
    assert scanner.scan() == ["go.mod"]


def test_scanning_missing_directory_fails(tmp_path):
    with pytest.raises(ScanError):
        DirectoryScanner(str(tmp_path / "nope")).scan()


def test_detection_table_lists_markers_and_patterns():
    table = dict(detection_table())
    assert table["go.mod"] == ("go",)
    assert table["*.java"] == ("java",)
