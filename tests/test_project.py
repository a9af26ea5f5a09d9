import json
import subprocess
from pathlib import Path

from rustlings.project import Crate, RustAnalyzerProject


def test_crate_defaults():
    crate = Crate(root_module="exercises/intro/intro1.rs")
    assert crate.to_dict() == {
        "root_module": "exercises/intro/intro1.rs",
        "edition": "2021",
        "deps": [],
        "cfg": ["test"],
    }


def test_add_path_only_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    project.add_path("exercises/README.md")
    project.add_path("exercises/intro")
    project.add_path("exercises/old.rs.bak")
    assert [c.root_module for c in project.crates] == ["exercises/intro/intro1.rs"]


def test_exercises_to_json_finds_nested_sources(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("fn main() {}")
    (tmp_path / "exercises" / "quiz1.rs").write_text("fn main() {}")
    (tmp_path / "exercises" / "README.md").write_text("readme")
    project = RustAnalyzerProject()
    project.exercises_to_json()
    roots = sorted(c.root_module for c in project.crates)
    assert roots == sorted([str(Path("exercises/intro/intro1.rs")), str(Path("exercises/quiz1.rs"))])


def test_exercises_to_json_missing_root_adds_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    project = RustAnalyzerProject()
    project.exercises_to_json("exercises")
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/toolchain/src")
    project.add_path("exercises/quiz1.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    content = target.read_text()
    assert json.loads(content) == project.to_dict()
    assert ": " not in content


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/custom/src"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, b"/opt/toolchain\n", b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert calls == [["rustc", "--print", "sysroot"]]
    parts = Path(project.sysroot_src).parts
    assert parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert Path(*parts[:-5]) == Path("/opt/toolchain")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out