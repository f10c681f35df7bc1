"""Unit tests for the invoice-form-share command."""

import json

import pytest

from invoice_form.cli import main
from invoice_form.sharing.key_map import INVOICE_KEY_COMPRESSION_MAP, KEY_MAP_VERSION
from invoice_form.sharing.links import generate_share_url, load_from_url


def test_keymap_prints_document(capsys) -> None:
    assert main(["keymap"]) == 0

    document = json.loads(capsys.readouterr().out)
    assert document["version"] == KEY_MAP_VERSION
    assert document["param"] == "data"
    assert document["keys"] == dict(INVOICE_KEY_COMPRESSION_MAP)


def test_keymap_writes_file(tmp_path, capsys) -> None:
    target = tmp_path / "public" / "keymap.json"

    assert main(["keymap", str(target)]) == 0

    assert "Wrote" in capsys.readouterr().out
    assert json.loads(target.read_text(encoding="utf-8"))["keys"]["dateOfIssue"] == "g"


def test_encode_from_file(tmp_path, capsys, invoice_dict: dict) -> None:
    source = tmp_path / "invoice.json"
    source.write_text(json.dumps(invoice_dict, ensure_ascii=False), encoding="utf-8")

    assert main(["encode", "https://app.example.com/", str(source)]) == 0

    url = capsys.readouterr().out.strip()
    assert url.startswith("https://app.example.com/?data=")
    assert load_from_url(url) == invoice_dict


def test_encode_rejects_invalid_json(tmp_path, capsys) -> None:
    source = tmp_path / "invoice.json"
    source.write_text("{broken", encoding="utf-8")

    assert main(["encode", "https://app.example.com/", str(source)]) == 1
    assert "Invalid invoice JSON" in capsys.readouterr().err


@pytest.mark.parametrize("text", ["[1]", "\"invoice\"", "42", "null"])
def test_encode_rejects_json_that_is_not_an_object(tmp_path, capsys, text: str) -> None:
    source = tmp_path / "invoice.json"
    source.write_text(text, encoding="utf-8")

    assert main(["encode", "https://app.example.com/", str(source)]) == 1

    captured = capsys.readouterr()
    assert "expected an object" in captured.err
    assert "Traceback" not in captured.err
    assert captured.out == ""


def test_encode_rejects_embedded_logo(tmp_path, capsys) -> None:
    source = tmp_path / "invoice.json"
    source.write_text('{"logo": "data:image/png;base64,AAAA"}', encoding="utf-8")

    assert main(["encode", "https://app.example.com/", str(source)]) == 1
    assert "Remove the logo first" in capsys.readouterr().err


def test_decode_prints_invoice(capsys, invoice_dict: dict) -> None:
    url = generate_share_url(invoice_dict, "https://app.example.com/")

    assert main(["decode", url]) == 0

    assert json.loads(capsys.readouterr().out) == invoice_dict


def test_decode_without_data(capsys) -> None:
    assert main(["decode", "https://app.example.com/?lang=pl"]) == 1
    assert "No invoice data found" in capsys.readouterr().err


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        main([])
