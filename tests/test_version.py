from npdversion.version import print_version, version


def test_version_defaults_to_unknown():
    assert version() == "UNKNOWN"


def test_version_is_stable_between_calls():
    first = version()
    second = version()
    assert first == "UNKNOWN"
    assert second == "UNKNOWN"


def test_print_version_writes_unknown_line(capsys):
    print_version()
    captured = capsys.readouterr()
    assert captured.out == "UNKNOWN\n"
    assert captured.err == ""


def test_print_version_matches_version(capsys):
    print_version()
    captured = capsys.readouterr()
    assert captured.out.rstrip("\n") == version()


def test_print_version_twice_prints_two_lines(capsys):
    print_version()
    print_version()
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["UNKNOWN", "UNKNOWN"]