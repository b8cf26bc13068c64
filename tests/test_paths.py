from pathlib import PurePath

import pytest

from segtrie import join_segments, path_segments


@pytest.mark.parametrize("path, segments", [
    ("/etc/bin/echo", ["/", "etc", "bin", "echo"]),
    ("usr/cat", ["usr", "cat"]),
    ("", []),
])
def test_path_segments(path, segments):
    assert path_segments(path) == segments


def test_join_segments():
    assert join_segments(["/", "etc", "bin"]) == str(PurePath("/etc/bin"))
    assert join_segments([]) == ""
    assert join_segments(iter(["usr", "tar", "jello"])) == str(PurePath("usr/tar/jello"))
