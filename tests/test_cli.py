"""Tests for the command line interface."""

import json
from pathlib import Path

import yaml  # type: ignore[import-untyped]
from click.testing import CliRunner
from openpyxl import load_workbook  # type: ignore[import-untyped]

from licparse import cli


def _write_license(tmp_path: Path, text: str, name: str = "LICENSE") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_split_outputs_json(tmp_path: Path) -> None:
    """Ensure splitting a license prints its paragraphs as JSON."""

    path = _write_license(tmp_path, "Intro.\n\n   * Item.\n")
    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["split", str(path), "--package", "pkg"]
    )

    assert result.exit_code == 0
    assert json.loads(result.output) == [
        {
            "packages": ["pkg"],
            "source": str(path),
            "paragraphs": [
                {"text": "Intro.", "indent": 0},
                {"text": "* Item.", "indent": 1},
            ],
        }
    ]


def test_split_outputs_yaml(tmp_path: Path) -> None:
    """Ensure YAML output is sent to the console."""

    path = _write_license(tmp_path, "Only paragraph.")
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["split", str(path), "--format", "yaml"])

    assert result.exit_code == 0
    data = yaml.safe_load(result.output)
    assert data[0]["paragraphs"] == [{"text": "Only paragraph.", "indent": 0}]


def test_split_combines_files_and_manifests(
    tmp_path: Path, bsd_license: str, lgpl_preamble: str
) -> None:
    """Ensure files come first, followed by manifest entries in order."""

    path = _write_license(tmp_path, bsd_license)
    _write_license(tmp_path, lgpl_preamble, name="LGPL.txt")
    manifest = tmp_path / "manifest.yaml"
    manifest.write_text(
        "licenses:\n"
        "  - packages: [lgpl_pkg]\n"
        "    file: LGPL.txt\n",
        encoding="utf-8",
    )

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["split", str(path), "--manifest", str(manifest)]
    )

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [entry["packages"] for entry in data] == [[], ["lgpl_pkg"]]
    assert len(data[0]["paragraphs"]) == 5
    assert data[1]["paragraphs"][0] == {
        "text": "GNU LESSER GENERAL PUBLIC LICENSE",
        "indent": -1,
    }


def test_split_writes_json_to_directory(tmp_path: Path) -> None:
    """Ensure JSON output is written when a directory is provided."""

    path = _write_license(tmp_path, "Text.")
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["split", str(path), "--output", str(out_dir)]
    )

    out_file = out_dir / "licenses.json"
    assert result.exit_code == 0
    assert json.loads(out_file.read_text())[0]["paragraphs"] == [
        {"text": "Text.", "indent": 0}
    ]


def test_split_writes_text(tmp_path: Path) -> None:
    """Ensure the text format renders indentation and centering."""

    path = _write_license(
        tmp_path, "                  Title\n\nBody.\n\n      Nested.\n"
    )
    out_file = tmp_path / "out.txt"

    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [
            "split",
            str(path),
            "--package",
            "pkg",
            "--format",
            "text",
            "--width",
            "21",
            "--indent-width",
            "2",
            "--output",
            str(out_file),
        ],
    )

    assert result.exit_code == 0
    assert out_file.read_text(encoding="utf-8") == (
        "pkg\n\n        Title\n\nBody.\n\n    Nested."
    )


def test_split_writes_xlsx(tmp_path: Path, bsd_license: str) -> None:
    """Ensure XLSX output holds one row per entry and per paragraph."""

    path = _write_license(tmp_path, bsd_license)
    out_file = tmp_path / "out.xlsx"

    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [
            "split",
            str(path),
            "--package",
            "bsd",
            "--format",
            "xlsx",
            "--output",
            str(out_file),
        ],
    )

    assert result.exit_code == 0
    workbook = load_workbook(out_file)
    assert set(workbook.sheetnames) == {"LicenseEntry", "Paragraph"}

    entry_sheet = workbook["LicenseEntry"]
    assert entry_sheet.cell(row=2, column=1).value == "license_1"
    assert json.loads(str(entry_sheet.cell(row=2, column=2).value)) == ["bsd"]

    par_sheet = workbook["Paragraph"]
    headers = [cell.value for cell in par_sheet[1]]
    assert headers == [
        "par_id",
        "parent_id",
        "index",
        "indent",
        "centered",
        "text",
    ]
    assert par_sheet.max_row == 6
    assert par_sheet.cell(row=4, column=4).value == 1
    assert "Paragraph" in par_sheet.tables


def test_split_xlsx_requires_output(tmp_path: Path) -> None:
    """Ensure XLSX output refuses to write to the console."""

    path = _write_license(tmp_path, "Text.")
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["split", str(path), "--format", "xlsx"])

    assert result.exit_code == 2
    assert "Output file is required" in result.output


def test_split_requires_input() -> None:
    """Ensure the command complains when nothing is given to split."""

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["split"])

    assert result.exit_code == 2
    assert "Provide license FILES or --manifest" in result.output


def test_split_reports_bad_manifest(tmp_path: Path) -> None:
    """Ensure malformed manifests are reported without a traceback."""

    manifest = tmp_path / "bad.yaml"
    manifest.write_text("licenses: 3\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["split", "--manifest", str(manifest)])

    assert result.exit_code == 1
    assert "manifest must contain a 'licenses' list" in result.output


def test_paragraphs_reads_stdin() -> None:
    """Ensure paragraphs are printed as JSON lines."""

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["paragraphs"], input="First.\n\n            Centered.\n"
    )

    assert result.exit_code == 0
    lines = [json.loads(line) for line in result.output.splitlines()]
    assert lines == [
        {"text": "First.", "indent": 0},
        {"text": "Centered.", "indent": -1},
    ]


def test_version_option() -> None:
    """Ensure the version option reports the program name."""

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--version"])

    assert result.exit_code == 0
    assert "licparse" in result.output
