from core.log import Log, LogManager


def test_debug_respects_verbosity():
    count = Log.count()
    Log.debug("hidden", 2)
    assert Log.count() == count
    Log.set_verbosity(2)
    Log.debug("shown", 2)
    assert Log.last() == "[test_log.py] shown"


def test_instances_share_entries():
    other = LogManager(verbosity=5)
    other.add("from other")
    assert Log.last() == "from other"


def test_clear_leaves_marker():
    Log.add("something")
    Log.clear()
    assert Log.count() == 1
    assert Log.last() == "Log cleared"


def test_write_to_file(tmp_path):
    Log.add("entry one")
    path = tmp_path / "session.log"
    assert Log.write_to_file(str(path))
    text = path.read_text(encoding="utf-8")
    assert "entry one" in text
    assert Log.last().startswith("Log written to file")


def test_write_to_bad_path_reports(tmp_path):
    assert not Log.write_to_file(str(tmp_path / "missing" / "x.log"))
    assert Log.last().startswith("Failed to write log")
