import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from rustdrill.project import Crate, RustAnalyzerProject


def test_to_json_format():
    project = RustAnalyzerProject(sysroot_src="/src", crates=[Crate("a.rs")])
    assert project.to_json() == (
        '{"sysroot_src":"/src","crates":'
        '[{"root_module":"a.rs","edition":"2021","deps":[],"cfg":["test"]}]}'
    )


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/lib", crates=[Crate("x.rs"), Crate("y.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    data = json.loads(target.read_text())
    restored = RustAnalyzerProject(
        sysroot_src=data["sysroot_src"], crates=[Crate(**c) for c in data["crates"]]
    )
    assert restored == project


def test_exercises_to_json_collects_rs_files(tmp_path):
    root = tmp_path / "exercises"
    (root / "sub").mkdir(parents=True)
    for name in ["a.rs", "b.txt", "sub/c.rs", "z.rs"]:
        (root / name).write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(root)
    assert [c.root_module for c in project.crates] == [
        str(root / "a.rs"), str(root / "sub" / "c.rs"), str(root / "z.rs"),
    ]
    assert all(c.cfg == ["test"] and c.edition == "2021" for c in project.crates)


def test_exercises_to_json_missing_root(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "nowhere")
    assert project.crates == []


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/rust/src")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/custom/rust/src"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    result = subprocess.CompletedProcess([], 0, stdout=b"/opt/rust/toolchain\n", stderr=b"")
    with patch("rustdrill.project.subprocess.run", return_value=result) as run:
        project = RustAnalyzerProject()
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert project.sysroot_src == str(
        Path("/opt/rust/toolchain/lib/rustlib/src/rust/library")
    )
    assert "Determined toolchain: /opt/rust/toolchain" in capsys.readouterr().out