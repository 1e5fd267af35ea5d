from pathlib import Path

from boincview.config import CONFIG_TAG, DEFAULT_HOST, DEFAULT_PORT, Config, ServerEntry


def make(tmp_path: Path) -> Config:
    return Config(".boinctui.cfg", tmp_path)


def test_default_when_file_missing(tmp_path):
    cfg = make(tmp_path)
    assert cfg.is_default is True
    assert cfg.errmsg == ""
    assert cfg.servers() == [ServerEntry("127.0.0.1", "31416", "")]
    assert cfg.root.tag == CONFIG_TAG


def test_no_filename_uses_defaults_and_writes_nothing(tmp_path):
    cfg = Config(None, tmp_path)
    cfg.save()
    assert cfg.path is None
    assert cfg.servers() == [ServerEntry(DEFAULT_HOST, DEFAULT_PORT, "")]
    assert list(tmp_path.iterdir()) == []


def test_save_and_load_round_trip(tmp_path):
    cfg = make(tmp_path)
    password = "password"
    cfg.add_host("example.com", "1234", password)
    cfg.set_int("wtask_height_percent", 5000)
    cfg.save()

    again = make(tmp_path)
    assert again.is_default is False
    assert again.errmsg == ""
    assert again.servers() == cfg.servers()
    assert again.get_int("wtask_height_percent") == 5000


def test_password_stored_only_when_given(tmp_path):
    cfg = make(tmp_path)
    cfg.add_host("example.com", "1234", "")
    assert cfg.root.findall("server")[-1].find("pwd") is None


def test_empty_host_or_port_is_skipped(tmp_path):
    cfg = make(tmp_path)
    before = cfg.servers()
    cfg.add_host("", "1234", "")
    cfg.add_host("example.com", "", "")
    assert cfg.servers() == before


def test_get_int_missing_is_zero(tmp_path):
    cfg = make(tmp_path)
    assert cfg.get_int("nothing_here") == 0


def test_set_int_overwrites(tmp_path):
    cfg = make(tmp_path)
    cfg.set_int("line_draw_mode", 1)
    cfg.set_int("line_draw_mode", 0)
    assert cfg.get_int("line_draw_mode") == 0
    assert len(cfg.root.findall("line_draw_mode")) == 1


def test_line_draw_mode_read_on_load(tmp_path):
    (tmp_path / ".boinctui.cfg").write_text(
        "<boinctui_cfg><line_draw_mode>1</line_draw_mode></boinctui_cfg>"
    )
    cfg = make(tmp_path)
    assert cfg.ascii_line_draw == 1
    assert cfg.servers() == []


def test_broken_file_reports_error_and_is_kept(tmp_path):
    path = tmp_path / ".boinctui.cfg"
    path.write_text("<boinctui_cfg><server>")
    cfg = make(tmp_path)
    assert cfg.errmsg.startswith(str(path) + "\n")
    cfg.save()
    assert path.read_text() == "<boinctui_cfg><server>"


def test_replace_servers_trims_and_replaces(tmp_path):
    cfg = make(tmp_path)
    cfg.replace_servers(
        [ServerEntry("alpha   ", "31416 ", ""), ServerEntry("", "1", ""), ServerEntry("beta", "2", "")]
    )
    assert cfg.servers() == [ServerEntry("alpha", "31416", ""), ServerEntry("beta", "2", "")]


def test_replace_servers_with_nothing_empties_list(tmp_path):
    cfg = make(tmp_path)
    cfg.replace_servers([])
    assert cfg.servers() == []