"""Tests for the terminal triage interface."""

import io

import pytest
from PIL import Image
from rich.console import Console

from image_triage.core.session import TriageApp
from image_triage.ui.triage import TriageUI, pick_folder


def scripted_console(answers):
    """Console writing to a buffer that reads input lines from ``answers``."""
    console = Console(file=io.StringIO(), width=120, color_system=None)
    remaining = list(answers)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    console.input = fake_input
    return console


def output_of(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def app(workspace):
    Image.new("RGB", (32, 24), color="blue").save(workspace.input_folder / "a.png", "PNG")
    return TriageApp(workspace)


class TestPickFolder:
    """Test the folder prompt."""

    def test_returns_entered_path(self, tmp_path):
        console = scripted_console([str(tmp_path)])

        assert pick_folder(console) == tmp_path

    def test_blank_cancels(self):
        assert pick_folder(scripted_console(["   "])) is None

    def test_eof_cancels(self):
        assert pick_folder(scripted_console([])) is None


class TestConfigScreen:
    """Test commands on the configuration screen."""

    def test_shows_folders(self, app, workspace):
        ui = TriageUI(app, scripted_console([]))

        ui.show_config_screen()

        text = output_of(ui.console)
        assert "Configuration" in text
        assert "keep" in text
        assert "later" in text

    def test_set_input_folder(self, app, tmp_path):
        ui = TriageUI(app, scripted_console([str(tmp_path / "other")]))

        assert ui.handle_command("i")
        assert app.config.input_folder == tmp_path / "other"

    def test_set_trash_folder(self, app, tmp_path):
        ui = TriageUI(app, scripted_console([str(tmp_path / "bin")]))

        ui.handle_command("t")

        assert app.config.trash_folder == tmp_path / "bin"

    def test_add_destination(self, app, tmp_path):
        ui = TriageUI(app, scripted_console([str(tmp_path / "third")]))

        ui.handle_command("a")

        assert app.config.destination_folders[-1] == tmp_path / "third"

    def test_cancelled_prompt_changes_nothing(self, app):
        before = app.config.destination_folders
        ui = TriageUI(app, scripted_console([""]))

        ui.handle_command("a")

        assert app.config.destination_folders == before

    def test_remove_destination(self, app, workspace):
        ui = TriageUI(app, scripted_console([]))
        second = workspace.destination_folders[1]

        ui.handle_command("r 1")

        assert app.config.destination_folders == [second]

    def test_remove_destination_bad_number(self, app):
        ui = TriageUI(app, scripted_console([]))

        ui.handle_command("r 9")

        assert len(app.config.destination_folders) == 2
        assert "No destination folder numbered 9" in output_of(ui.console)

    def test_start_triage(self, app):
        ui = TriageUI(app, scripted_console([]))

        ui.handle_command("s")

        assert app.is_triaging
        assert "Loaded 1 images" in output_of(ui.console)

    def test_quit(self, app):
        assert not TriageUI(app, scripted_console([])).handle_command("Q")


class TestTriageScreen:
    """Test commands on the triage screen."""

    def test_shows_current_image(self, app):
        app.start_triage()
        ui = TriageUI(app, scripted_console([]))

        ui.show_screen()

        text = output_of(ui.console)
        assert "a.png" in text
        assert "32x24" in text
        assert "Image 1/1" in text

    def test_shows_decode_error(self, app, workspace):
        (workspace.input_folder / "a.png").write_text("broken", encoding="utf-8")
        app.start_triage()
        ui = TriageUI(app, scripted_console([]))

        ui.show_screen()

        assert "Could not display image" in output_of(ui.console)

    def test_move_to_numbered_destination(self, app, workspace):
        app.start_triage()
        ui = TriageUI(app, scripted_console([]))

        ui.handle_command("2")

        assert (workspace.destination_folders[1] / "a.png").exists()
        assert app.engine.tracker.is_empty

    def test_unknown_destination_number(self, app):
        app.start_triage()
        ui = TriageUI(app, scripted_console([]))

        ui.handle_command("7")

        assert len(app.engine.tracker) == 1

    def test_delete_and_undo(self, app, workspace):
        app.start_triage()
        ui = TriageUI(app, scripted_console([]))

        ui.handle_command("d")
        assert (workspace.trash_folder / "a.png").exists()

        ui.handle_command("u")
        assert (workspace.input_folder / "a.png").exists()
        assert app.engine.current_path == workspace.input_folder / "a.png"

    def test_failure_is_reported(self, app, workspace):
        (workspace.destination_folders[0] / "a.png").touch()
        app.start_triage()
        ui = TriageUI(app, scripted_console([]))

        ui.handle_command("1")

        assert "already exists" in output_of(ui.console)
        assert len(app.engine.tracker) == 1

    def test_back_to_config(self, app):
        app.start_triage()
        ui = TriageUI(app, scripted_console([]))

        ui.handle_command("b")

        assert not app.is_triaging

    def test_empty_queue_screen(self, app, workspace):
        app.start_triage()
        app.engine.move_to(workspace.destination_folders[0])
        ui = TriageUI(app, scripted_console([]))

        ui.show_screen()

        assert "No images left" in output_of(ui.console)


def test_run_full_session(app, workspace):
    """Start triage, move the image, undo, then quit."""
    console = scripted_console(["s", "1", "u", "q"])
    ui = TriageUI(app, console)

    ui.run()

    assert (workspace.input_folder / "a.png").exists()
    assert not (workspace.destination_folders[0] / "a.png").exists()
    assert app.engine.undo_depth == 0


def test_run_stops_on_eof(app):
    ui = TriageUI(app, scripted_console(["s"]))

    ui.run()

    assert app.is_triaging


def test_config_save_failure_is_reported(app, workspace, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a folder", encoding="utf-8")
    workspace.config_file = blocker / "config.json"
    before = workspace.destination_folders
    ui = TriageUI(app, scripted_console([str(tmp_path / "x")]))

    assert ui.handle_command("a")

    assert workspace.destination_folders == before
    assert "Could not save configuration" in output_of(ui.console)
