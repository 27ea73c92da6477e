import io
import json

import pytest

from txtx.cli import main


def _run(*argv: str, stdin: str = "") -> tuple[int, str]:
    out = io.StringIO()
    code = main(list(argv), stdin=io.StringIO(stdin), stdout=out)
    return code, out.getvalue()


def test_run_tool_on_arguments() -> None:
    code, output = _run("run", "base64-encode", "hello")

    assert code == 0
    assert output == "aGVsbG8=\n"


def test_run_tool_reads_stdin() -> None:
    code, output = _run("run", "rot13", stdin="Hello\n")

    assert code == 0
    assert output == "Uryyb\n"


def test_run_tool_with_options() -> None:
    code, output = _run("run", "caesar-encode", "abc", "-o", "shift=2")

    assert code == 0
    assert output.strip() == "cde"


def test_run_generator_without_input() -> None:
    code, output = _run("run", "password-generator", "-o", "length=20")

    assert code == 0
    assert len(output.strip()) == 20


def test_run_reports_errors(capsys) -> None:
    unknown, _ = _run("run", "no-such-tool", "x")
    missing_input, _ = _run("run", "base64-encode")
    bad_option, _ = _run("run", "caesar-encode", "abc", "-o", "shift")
    failure, _ = _run("run", "base64-decode", "!!!")

    assert (unknown, missing_input, bad_option, failure) == (1, 1, 1, 1)
    err = capsys.readouterr().err
    assert "Unknown tool 'no-such-tool'" in err
    assert "No input provided" in err
    assert "Invalid Base64 input" in err


def test_search_json() -> None:
    code, output = _run("search", "sha256", "--json", "--type", "tool")

    results = json.loads(output)
    assert code == 0
    assert results[0]["id"] == "sha256-hash"
    assert results[0]["category_slug"] == "crypto"


def test_search_without_results() -> None:
    code, output = _run("search", "zzzzqqq")

    assert code == 0
    assert output.strip() == "No results"


def test_list_category() -> None:
    code, output = _run("list", "--category", "colors")

    assert code == 0
    assert output.startswith("Color Utilities:")
    assert "hex-to-rgb" in output
    assert "base64-encode" not in output


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("txtx ")


def test_run_reports_out_of_range_input(capsys) -> None:
    code, output = _run("run", "unix-to-date", "inf")

    assert code == 1
    assert output == ""
    assert "Invalid timestamp" in capsys.readouterr().err
