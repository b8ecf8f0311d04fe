from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
PACKAGE_DIR = ROOT_DIR / "simpleargparse"
OWNER = "SimpleArgParse contributors"


def test_license_file_names_owner():
    license_text = (ROOT_DIR / "LICENSE").read_text(encoding="UTF-8")
    assert license_text.startswith("MIT License")
    assert f"Copyright (c) 2025 {OWNER}" in license_text


def test_source_headers_name_owner():
    for source in PACKAGE_DIR.rglob("*.py"):
        header = "\n".join(source.read_text(encoding="UTF-8").splitlines()[:5])
        assert OWNER in header, source
