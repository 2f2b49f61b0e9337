import csv

import pytest

from conftest import E3, make_user

from license_guardian import cli as cli_module
from license_guardian.cli import LicenseGuardianCLI, build_parser, main
from license_guardian.integrations.directory import MockDirectoryService


def _run(directory, argv):
    args = build_parser().parse_args(argv)
    return LicenseGuardianCLI(directory=directory).run(args)


def test_encode_and_decode(capsys):
    assert main(["encode", "hello"]) == 0
    assert capsys.readouterr().out.strip() == "aGVsbG8="

    assert main(["decode", "aGVsbG8="]) == 0
    assert capsys.readouterr().out.strip() == "hello"


def test_decode_invalid_input_reports_error(capsys):
    assert main(["decode", "***"]) == 1
    assert "Error" in capsys.readouterr().out


def test_to_csv_from_file(tmp_path, capsys):
    source = tmp_path / "names.txt"
    source.write_text("alice\nbob\n", encoding="utf-8")
    target = tmp_path / "names.csv"

    assert main(["to-csv", "--header", "Name", "--input", str(source), "--output", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == 'Name\n"alice",\n"bob"\n'


def test_sku_name_lookup(capsys):
    assert main(["sku-name", "ENTERPRISEPACK"]) == 0
    assert "Office 365 E3" in capsys.readouterr().out

    assert main(["sku-name", "UNKNOWN_THING"]) == 0
    assert "No product name" in capsys.readouterr().out


def test_remove_rejects_from_group_path():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["remove", "--path", "FromGroup", "--all"])


def test_report_requires_a_scope():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["report", "--path", "Directly"])


def test_report_exports_csv(directory, tmp_path):
    target = tmp_path / "report.csv"

    assert _run(directory, ["report", "--path", "FromGroup", "--sku", "ENTERPRISEPACK", "--output", str(target)]) == 0

    with target.open(newline="", encoding="utf-8") as handle:
        records = list(csv.DictReader(handle))
    assert [record["UserPrincipalName"] for record in records] == ["mia@contoso.com"]
    assert records[0]["ProductName"] == "Office 365 E3"
    assert records[0]["AssignedByGroups"] == "group-a;group-b"


def test_report_unknown_sku_fails(directory, capsys):
    assert _run(directory, ["report", "--path", "Directly", "--sku", "NOPE"]) == 1
    assert "NOPE" in capsys.readouterr().out


def test_skus_table(directory, capsys):
    assert _run(directory, ["skus"]) == 0
    assert "ENTERPRISEPACK" in capsys.readouterr().out


def test_remove_what_if_changes_nothing(directory):
    assert _run(directory, ["remove", "--path", "Directly", "--all", "--what-if", "--delay", "0"]) == 0
    assert directory.remove_calls == []


def test_remove_yes_removes_direct_assignments(directory):
    assert _run(directory, ["remove", "--path", "Directly", "--sku", "ENTERPRISEPACK", "--yes", "--delay", "0"]) == 0

    assert [call["user_id"] for call in directory.remove_calls] == ["carl", "zoe"]
    assert E3 not in directory.users["zoe"].assigned_licenses


def test_remove_exit_code_reflects_failures(directory):
    directory.failing_users.add("zoe")

    assert _run(directory, ["remove", "--path", "Directly", "--sku", "ENTERPRISEPACK", "--yes", "--delay", "0"]) == 1
    assert len(directory.remove_calls) == 2


@pytest.fixture
def bracketed_directory(skus):
    users = [
        make_user("jane", "Jane Doe [contractor]", [(E3, None)]),
        make_user("weird", "Weird [/b] Name", [(E3, None)]),
    ]
    return MockDirectoryService(skus=skus, users=users)


def test_report_shows_bracketed_names_verbatim(bracketed_directory, monkeypatch, capsys):
    monkeypatch.setattr(cli_module.console, "width", 200)

    assert _run(bracketed_directory, ["report", "--path", "Directly", "--sku", "ENTERPRISEPACK"]) == 0

    out = capsys.readouterr().out
    assert "Jane Doe [contractor]" in out
    assert "Weird [/b] Name" in out


def test_remove_what_if_survives_markup_like_names(bracketed_directory, monkeypatch, capsys):
    monkeypatch.setattr(cli_module.console, "width", 200)

    assert _run(bracketed_directory, ["remove", "--path", "Directly", "--sku", "ENTERPRISEPACK", "--what-if"]) == 0

    out = capsys.readouterr().out
    assert "Weird [/b] Name" in out
    assert "Jane Doe [contractor]" in out
    assert bracketed_directory.remove_calls == []
