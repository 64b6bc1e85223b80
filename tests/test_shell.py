import io
import json

import pytest
from rich.console import Console

from photocat.bootstrap import build_catalog_service
from photocat.shell import CatalogShell, ShellSignal

from conftest import PHOTOS, read_photos


def make_reader(*lines):
    remaining = list(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read.prompts = prompts
    return read


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    return Console(file=output, width=200)


@pytest.fixture
def make_shell(catalog_dir, console):
    def factory(*lines):
        service = build_catalog_service(
            catalog_dir,
            notifier=lambda message: console.print(message, markup=False, highlight=False),
        )
        reader = make_reader(*lines)
        return CatalogShell(service, reader=reader, console=console), reader

    return factory


def _json_after(text, marker):
    start = text.index(marker) + len(marker)
    decoder = json.JSONDecoder()
    value, _ = decoder.raw_decode(text[start:].lstrip())
    return value


def test_exit_choice(make_shell, output):
    shell, reader = make_shell("5")
    shell.run()
    text = output.getvalue()
    assert "=== Photo Management Menu ===" in text
    assert "Exiting... Goodbye!" in text
    assert reader.prompts == ["Your selection> "]


def test_end_of_input_stops_loop(make_shell, output):
    shell, reader = make_shell()
    shell.run()
    assert reader.prompts == ["Your selection> "]
    assert "Goodbye" not in output.getvalue()


def test_invalid_selection_returns_to_menu(make_shell, output):
    shell, _ = make_shell("9", "5")
    shell.run()
    text = output.getvalue()
    assert "Invalid selection. Please enter 1–5." in text
    assert text.count("=== Photo Management Menu ===") == 2


def test_dispatch_signals(make_shell):
    shell, _ = make_shell()
    assert shell.dispatch("5") is ShellSignal.EXIT
    assert shell.dispatch("x") is ShellSignal.CONTINUE


def test_find_photo_prints_json(make_shell, output):
    shell, _ = make_shell("1", "1", "5")
    shell.run()
    printed = _json_after(output.getvalue(), "5. Exit\n")
    assert printed == {
        "id": "1",
        "filename": "beach.jpg",
        "title": "Old",
        "formattedDate": "May 1, 2023",
        "albumNames": ["trips"],
        "tags": ["x"],
    }


def test_find_missing_photo(make_shell, output):
    shell, _ = make_shell("1", "42", "5")
    shell.run()
    assert output.getvalue().count("no photo found with this id") == 1


def test_update_photo_flow(catalog_dir, make_shell, output):
    shell, reader = make_shell("2", "1", "New Title", "", "5")
    shell.run()
    assert reader.prompts[1:4] == ["Enter Photo ID: ", "Enter New Title: ", "Enter New description: "]
    stored = read_photos(catalog_dir)[0]
    assert stored["title"] == "New Title"
    assert stored["description"] == PHOTOS[0]["description"]
    assert "file updated" in output.getvalue()


def test_update_missing_photo_skips_edit_prompts(make_shell):
    shell, reader = make_shell("2", "404", "5")
    shell.run()
    assert "Enter New Title: " not in reader.prompts


def test_album_list_lowercases_query(make_shell, output):
    shell, _ = make_shell("3", "TRIPS", "5")
    shell.run()
    printed = _json_after(output.getvalue(), "5. Exit\n")
    assert [photo["id"] for photo in printed] == ["1", "2"]


def test_tag_photo_flow(catalog_dir, make_shell):
    shell, _ = make_shell("4", "3", "vacation", "5")
    shell.run()
    assert read_photos(catalog_dir)[2]["tags"] == ["pets", "home", "vacation"]


def test_catalog_error_keeps_menu_running(catalog_dir, make_shell, output):
    (catalog_dir / "photos.json").write_text("not json", encoding="utf-8")
    shell, reader = make_shell("1", "1", "5")
    shell.run()
    text = output.getvalue()
    assert "Error: Invalid JSON in" in text
    assert "Exiting... Goodbye!" in text


def test_invalid_utf8_document_keeps_menu_running(catalog_dir, make_shell, output):
    (catalog_dir / "photos.json").write_bytes(b'[{"id": 1, "title": "\xff"}]')
    shell, _ = make_shell("1", "1", "5")
    shell.run()
    text = output.getvalue()
    assert "Error: Invalid UTF-8 in" in text
    assert "Exiting... Goodbye!" in text
