import pytest
from PyQt5.QtCore import QSettings
import app
import tgawriter.common as cm


@pytest.fixture(autouse=True)
def settings(tmp_path, monkeypatch):
    settings = QSettings(str(tmp_path / "settings.ini"), QSettings.IniFormat)
    settings.setValue("OutputPath", str(tmp_path))
    monkeypatch.setattr(cm, "settings", settings)
    monkeypatch.setattr(app, "colorama_init", lambda: None)
    return settings


def test_load_settings_defaults(settings):
    settings.remove("OutputPath")
    loaded = cm.load_settings()
    assert loaded == {
        'blank_color': '0,0,0,255',
        'top_to_bottom': True,
        'output_path': '.'
    }
    assert settings.value("BlankColor") == '0,0,0,255'


def test_load_settings_list_color(settings):
    settings.setValue("BlankColor", ['1', '2', '3', '4'])
    settings.setValue("TopToBottom", 'false')
    loaded = cm.load_settings()
    assert loaded['blank_color'] == '1,2,3,4'
    assert loaded['top_to_bottom'] is False


def test_main_writes_image(tmp_path, capsys):
    code = app.main(["out.tga", "2", "1", "--color", "10,20,30,255"])
    assert code == 0
    data = (tmp_path / "out.tga").read_bytes()
    assert len(data) == 26
    assert data[18:] == bytes([10, 20, 30, 255]) * 2
    assert "Wrote" in capsys.readouterr().out


def test_main_sets_pixels_top_to_bottom(tmp_path):
    code = app.main(["out.tga", "1", "2", "--pixel", "0,0,1,2,3,4", "--top-to-bottom"])
    assert code == 0
    data = (tmp_path / "out.tga").read_bytes()
    assert data[18:22] == bytes([0, 0, 0, 255])
    assert data[22:26] == bytes([1, 2, 3, 4])


def test_main_sets_pixels_bottom_to_top(tmp_path):
    code = app.main(["out.tga", "1", "2", "--pixel", "0,0,1,2,3,4", "--bottom-to-top"])
    assert code == 0
    data = (tmp_path / "out.tga").read_bytes()
    assert data[18:22] == bytes([1, 2, 3, 4])


def test_main_out_of_bounds(tmp_path, capsys):
    code = app.main(["out.tga", "1", "1", "--pixel", "1,0,1,2,3,4"])
    assert code == 1
    assert "outside" in capsys.readouterr().out
    assert not (tmp_path / "out.tga").exists()


def test_main_bad_color(capsys):
    assert app.main(["out.tga", "1", "1", "--color", "1,2"]) == 1
    assert "Error" in capsys.readouterr().out


def test_main_zero_area_warns(tmp_path, capsys):
    assert app.main(["out.tga", "0", "3"]) == 0
    assert "Warning" in capsys.readouterr().out
    assert len((tmp_path / "out.tga").read_bytes()) == 18


def test_main_keep_existing(tmp_path):
    (tmp_path / "out.tga").write_bytes(b"old")
    assert app.main(["out.tga", "1", "1", "--keep-existing"]) == 0
    assert (tmp_path / "out.tga").read_bytes() == b"old"
    assert len((tmp_path / "out_0.tga").read_bytes()) == 22


def test_main_unavailable_sink(tmp_path):
    assert app.main([str(tmp_path / "missing" / "out.tga"), "1", "1"]) == 1
